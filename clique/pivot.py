# clique/pivot.py
from itertools import chain
from typing import Callable, FrozenSet, Iterator, List, Optional, Set, Tuple

from clique.timeunit import past_deadline


class Neighborhoods(dict):
    """vertex -> set of neighbors, filled on first lookup from the graph view."""

    def __init__(self, view):
        super().__init__()
        self.view = view

    def __missing__(self, v):
        nbrs = self.view.neighbors(v)
        self[v] = nbrs
        return nbrs


def choose_pivot(neighbors, P: Set, X: Set):
    """
    The vertex of P ∪ X with the most neighbors inside P.
    Ties go to whichever vertex the set iteration reaches first, so the
    choice (and the branching order) depends on the set implementation.
    """
    best = -1
    pivot = None
    for u in chain(P, X):
        count = len(P & neighbors[u])
        if count > best:
            best = count
            pivot = u
    return pivot


class _Frame:
    __slots__ = ("P", "R", "X", "candidates", "current")

    def __init__(self, P: Set, R: Tuple, X: Set, candidates: Iterator):
        self.P = P
        self.R = R
        self.X = X
        self.candidates = candidates
        self.current = None


_TIMED_OUT = object()
_DONE = object()


class PivotSearch:
    """
    Bron-Kerbosch with Tomita pivoting.

    The recursion runs on an explicit stack of frames, so the depth (at most |V|)
    is not tied to the interpreter's recursion limit. Each frame owns its P and X;
    after a child frame is finished, the candidate it branched on moves from P to X
    so that later siblings never report the same maximal clique again.
    """

    def search(self, view, deadline: Optional[int], sink: Callable[[FrozenSet], None]) -> bool:
        """
        Emit every maximal clique of `view` through `sink`.
        Returns True if the search stopped early because `deadline` passed.
        """
        P = set(view.vertices())
        if not P:
            return False
        neighbors = Neighborhoods(view)

        root = self._enter(neighbors, P, (), set(), deadline, sink)
        if root is _TIMED_OUT:
            return True
        stack: List[_Frame] = [root] if root is not None else []

        while stack:
            top = stack[-1]
            if top.current is not None:
                top.P.discard(top.current)
                top.X.add(top.current)
                top.current = None
            v = next(top.candidates, _DONE)
            if v is _DONE:
                stack.pop()
                continue
            top.current = v
            nv = neighbors[v]
            child = self._enter(neighbors, top.P & nv, top.R + (v,), top.X & nv, deadline, sink)
            if child is _TIMED_OUT:
                return True
            if child is not None:
                stack.append(child)
        return False

    def _enter(self, neighbors, P: Set, R: Tuple, X: Set, deadline, sink):
        # R is maximal: nothing left to add and nothing excluded that could be added
        if not P and not X:
            sink(frozenset(R))
            return None
        if past_deadline(deadline):
            return _TIMED_OUT
        u = choose_pivot(neighbors, P, X)
        nu = neighbors[u]
        candidates = [v for v in P if v not in nu]
        return _Frame(P, R, X, iter(candidates))

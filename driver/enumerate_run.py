# driver/enumerate_run.py
from typing import Any, Dict, FrozenSet, Iterable, List
import time

import networkx as nx

from clique.finder import MaximalCliqueFinder
from clique.timeunit import TimeUnit
from graph.verify import verify_cliques, print_check_summary


def _sorted_clique(Q: Iterable) -> list:
    try:
        return sorted(Q)
    except TypeError:
        return sorted(Q, key=repr)


def run_clique_enumeration(
    G,
    time_limit: float = 0,
    unit=TimeUnit.SECONDS,
    verbose: bool = True,
    check: bool = True,
) -> Dict[str, Any]:
    """
    Enumerate maximal cliques of G once and report what happened.
    time_limit == 0 means no time limit.
    """
    t0 = time.time()
    if verbose:
        print(f"[Init] graph: |V|={G.number_of_nodes()} |E|={G.number_of_edges()} "
              f"| time_limit={time_limit} {getattr(unit, 'name', unit)}")

    finder = MaximalCliqueFinder(G, timeout=time_limit, unit=unit)
    cliques = list(finder)
    maximum = list(finder.maximum_iterator())
    runtime = time.time() - t0
    stop_reason = "time_limit" if finder.is_time_limit_reached() else "exhaustive"

    if verbose:
        print(f"[Search] cliques={len(cliques)} | max_size={finder.max_size} "
              f"| maximum={len(maximum)} | t={runtime:.4f}s | stop={stop_reason}")

    rep = verify_cliques(G, cliques) if check else {}
    if verbose and check:
        print_check_summary(rep, prefix="[Check] ")

    return dict(
        num_cliques=len(cliques),
        max_size=finder.max_size,
        cliques=[_sorted_clique(Q) for Q in cliques],
        maximum_cliques=[_sorted_clique(Q) for Q in maximum],
        stop_reason=stop_reason,
        runtime_sec=runtime,
        final_check=rep,
        valid=rep.get("valid", True) if check else None,
    )


def compare_with_networkx(G, cliques: Iterable[Iterable]) -> Dict[str, Any]:
    """Diff a clique collection against networkx's own maximal clique enumeration."""
    ours = {frozenset(Q) for Q in cliques}
    ref = {frozenset(Q) for Q in nx.find_cliques(G)} if G.number_of_nodes() else set()
    missing: List[FrozenSet] = list(ref - ours)
    extra: List[FrozenSet] = list(ours - ref)
    return dict(
        agree=not missing and not extra,
        num_ours=len(ours),
        num_networkx=len(ref),
        missing=[_sorted_clique(Q) for Q in missing],
        extra=[_sorted_clique(Q) for Q in extra],
    )

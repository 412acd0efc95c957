# graph/view.py
from typing import Any, Hashable, Iterable, Iterator, Set, Tuple

import networkx as nx

from clique.errors import NullArgumentError


class GraphView:
    """
    Read-only window on a networkx graph, limited to what the clique search consumes:
      - the vertex set,
      - incident edges of a vertex (edge keys included for multigraphs),
      - the opposite endpoint of an edge,
      - a simplicity predicate (undirected, no self-loops, no parallel edges).
    """

    def __init__(self, G):
        if G is None:
            raise NullArgumentError("Graph cannot be null")
        self.G = G

    def vertices(self) -> Iterable[Hashable]:
        return self.G.nodes()

    def edges_of(self, v) -> Iterator[Tuple[Any, ...]]:
        if self.G.is_multigraph():
            return iter(self.G.edges(v, keys=True))
        return iter(self.G.edges(v))

    def opposite(self, edge, v):
        u, w = edge[0], edge[1]
        if u == v:
            return w
        if w == v:
            return u
        raise ValueError(f"{v!r} is not an endpoint of edge {edge!r}")

    def neighbors(self, v) -> Set[Hashable]:
        return {self.opposite(e, v) for e in self.edges_of(v)}

    def is_simple(self) -> bool:
        G = self.G
        if G.is_directed():
            return False
        if nx.number_of_selfloops(G) > 0:
            return False
        if G.is_multigraph():
            for _u, nbrs in G.adj.items():
                for keydict in nbrs.values():
                    if len(keydict) > 1:
                        return False
        return True

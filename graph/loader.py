# graph/loader.py
import re
from pathlib import Path
from typing import List, Tuple, Union

import networkx as nx

_DIMACS_P_LINE = re.compile(r"^\s*p\s+(\w+)\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)
_DIMACS_E_LINE = re.compile(r"^\s*e\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)


def load_demo_graph(seed: int = 0, n: int = 60, p: float = 0.2):
    # small random graph for quick runs
    return nx.erdos_renyi_graph(n=n, p=p, seed=seed)


def compact_node_labels(G: nx.Graph) -> nx.Graph:
    # Ensure nodes are 0..n-1 to keep output consistent across loaders.
    return nx.convert_node_labels_to_integers(G, first_label=0, ordering="sorted")


def load_dimacs_col(path: Union[str, Path], drop_selfloops: bool = True) -> nx.Graph:
    """
    DIMACS .col / .clq format:
      c comment
      p edge <n> <m>
      e u v
    Nodes are 1-based in the file; we convert to 0-based.
    """
    path = Path(path)
    n_decl = None
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("c"):
                continue
            mp = _DIMACS_P_LINE.match(line)
            if mp:
                _ptype, n_s, _m_s = mp.groups()
                n_decl = int(n_s)
                continue
            me = _DIMACS_E_LINE.match(line)
            if me:
                u_s, v_s = me.groups()
                edges.append((int(u_s) - 1, int(v_s) - 1))

    if n_decl is None:
        # infer n from max node id
        n_decl = max((max(u, v) for u, v in edges), default=-1) + 1

    G = nx.Graph()
    G.add_nodes_from(range(n_decl))
    G.add_edges_from(edges)
    if drop_selfloops:
        G.remove_edges_from(list(nx.selfloop_edges(G)))
    return G


def load_edgelist_txt(path: Union[str, Path], drop_selfloops: bool = True) -> nx.Graph:
    """
    Simple undirected edge list:
      u v
    Nodes can be arbitrary integers; we will relabel to 0..n-1.
    Lines starting with # or c are ignored, as are lines that do not parse.
    """
    path = Path(path)
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("c"):
                continue
            parts = s.split()
            if len(parts) < 2:
                continue
            try:
                u = int(parts[0])
                v = int(parts[1])
            except ValueError:
                continue
            edges.append((u, v))
    G = nx.Graph()
    G.add_edges_from(edges)
    if drop_selfloops:
        G.remove_edges_from(list(nx.selfloop_edges(G)))
    return compact_node_labels(G)


def load_graph(source: str, seed: int = 0, drop_selfloops: bool = True) -> nx.Graph:
    """'demo' -> random demo graph; *.col / *.clq -> DIMACS; anything else -> edge list."""
    if source == "demo":
        return load_demo_graph(seed=seed)
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"graph file not found: {path}")
    if path.suffix.lower() in (".col", ".clq"):
        return load_dimacs_col(path, drop_selfloops=drop_selfloops)
    return load_edgelist_txt(path, drop_selfloops=drop_selfloops)

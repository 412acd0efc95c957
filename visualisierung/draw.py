# visualisierung/draw.py
from __future__ import annotations
import os, re
from typing import Dict, Tuple, Set, List, Optional, Iterable
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

PALETTE = [
    "#E63946", "#457B9D", "#2A9D8F", "#F4A261", "#8E44AD", "#F1C40F",
    "#7F8C8D", "#1ABC9C", "#D35400", "#27AE60", "#C2185B", "#5D6D7E",
]

# Layout-Cache pro Graph-Signatur
_POS_CACHE: Dict[int, Dict] = {}

def _graph_signature(G: nx.Graph) -> int:
    """Stabile Signatur aus Knoten- und Kantenmengen, um Layouts zu cachen."""
    nodes_sig = tuple(sorted(map(repr, G.nodes())))
    edges_sig = tuple(sorted(tuple(sorted(map(repr, e))) for e in G.edges()))
    return hash((nodes_sig, edges_sig))

def _sanitize_step(step: str) -> str:
    """Kleinbuchstaben, [a-z0-9-_], Mehrfach-Bindestriche zusammenfassen."""
    s = step.strip().lower()
    s = re.sub(r"[^a-z0-9\-_]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "step"

def ensure_outdir(out_dir: str) -> None:
    os.makedirs(out_dir, exist_ok=True)

def color_for_index(idx: int) -> str:
    """Farbwert aus Palette (zyklisch)."""
    return PALETTE[idx % len(PALETTE)]

def _get_layout(G: nx.Graph, seed: int = 42) -> Dict:
    sig = _graph_signature(G)
    if sig in _POS_CACHE:
        return _POS_CACHE[sig]
    pos = nx.spring_layout(G, seed=seed)
    _POS_CACHE[sig] = pos
    return pos

def visualize_cliques(
    G: nx.Graph,
    maximum: Iterable[Iterable],
    step: str = "cliques",
    out_dir: str = "visualisierung/picture",
    layout_seed: int = 42,
    pos: Optional[Dict] = None,
    show_labels: bool = True,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 220,
    *,
    num_cliques: Optional[int] = None,
    time_limited: bool = False,
) -> str:
    """
    Zeichnet den Graphen und hebt die maximalen (größten) Cliquen hervor:
      - Knoten einer größten Clique → Palettenfarbe je Clique (erste Clique gewinnt)
      - Kanten innerhalb einer größten Clique → gleiche Farbe, dick
      - Alle anderen Knoten/Kanten → hellgrau
    Gibt den Pfad der geschriebenen PNG-Datei zurück.
    """
    ensure_outdir(out_dir)
    step_clean = _sanitize_step(step)
    maximum = [list(Q) for Q in maximum]

    # Knoten → Index der ersten größten Clique, die ihn enthält
    owner: Dict = {}
    for i, Q in enumerate(maximum):
        for v in Q:
            owner.setdefault(v, i)

    clique_edges: List[Tuple] = []
    edge_colors: List[str] = []
    for i, Q in enumerate(maximum):
        members: Set = set(Q)
        for (u, v) in G.edges():
            if u in members and v in members:
                clique_edges.append((u, v))
                edge_colors.append(color_for_index(i))
    highlighted = {frozenset(e) for e in clique_edges}
    other_edges = [e for e in G.edges() if frozenset(e) not in highlighted]

    if pos is None:
        pos = _get_layout(G, seed=layout_seed)

    plt.figure(figsize=figure_size, dpi=dpi)
    if other_edges:
        nx.draw_networkx_edges(G, pos, edgelist=other_edges, width=0.6, alpha=0.25, edge_color="#CCCCCC")
    if clique_edges:
        nx.draw_networkx_edges(G, pos, edgelist=clique_edges, width=1.8, alpha=0.95, edge_color=edge_colors)

    nodes = list(G.nodes())
    node_colors = [color_for_index(owner[v]) if v in owner else "#DDDDDD" for v in nodes]
    node_edge_colors = ["black" if v in owner else "#555555" for v in nodes]
    if nodes:
        nx.draw_networkx_nodes(
            G, pos,
            nodelist=nodes,
            node_color=node_colors,
            edgecolors=node_edge_colors,
            linewidths=0.8,
            node_size=260,
        )
    if show_labels:
        nx.draw_networkx_labels(G, pos, labels={v: str(v) for v in nodes}, font_size=7)

    size = len(maximum[0]) if maximum else 0
    total = f"{num_cliques}" if num_cliques is not None else "?"
    title = (f"{step} — maximal={total} — maximum size={size} x{len(maximum)}"
             + (" — time limit reached" if time_limited else ""))
    plt.title(title)
    plt.axis("off")
    plt.tight_layout()

    fname = f"step-{step_clean}_size-{size:03d}_count-{len(maximum):03d}.png"
    fpath = os.path.join(out_dir, fname)
    plt.savefig(fpath, bbox_inches="tight")
    plt.close()
    return fpath

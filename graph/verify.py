# graph/verify.py
from itertools import combinations
from typing import Any, Dict, FrozenSet, Iterable, List


def is_clique(G, Q: Iterable) -> bool:
    nodes = list(Q)
    return all(G.has_edge(u, v) for u, v in combinations(nodes, 2))


def is_maximal_clique(G, Q: Iterable) -> bool:
    """A clique nobody outside it is adjacent to in full."""
    members = set(Q)
    if not is_clique(G, members):
        return False
    for w in G.nodes():
        if w in members:
            continue
        if all(G.has_edge(w, u) for u in members):
            return False
    return True


def brute_force_maximal_cliques(G) -> List[FrozenSet]:
    """
    Every maximal clique by plain subset search. Exponential; meant as a
    reference for small graphs (|V| <= 12 or so).
    """
    nodes = list(G.nodes())
    if not nodes:
        return []
    cliques = []
    for k in range(1, len(nodes) + 1):
        for sub in combinations(nodes, k):
            if is_clique(G, sub):
                cliques.append(frozenset(sub))
    return [Q for Q in cliques if not any(Q < other for other in cliques)]


def verify_cliques(G, cliques: Iterable[Iterable], sample: int = 10) -> Dict[str, Any]:

    report: Dict[str, Any] = {}
    sets = [frozenset(Q) for Q in cliques]
    report["num_cliques"] = len(sets)
    report["max_size"] = max((len(Q) for Q in sets), default=0)

    # pairwise adjacency
    not_cliques = [sorted(Q) for Q in sets if not is_clique(G, Q)]
    report["num_not_cliques"] = len(not_cliques)
    report["not_cliques_sample"] = not_cliques[:sample]

    # maximality (only meaningful for real cliques)
    not_maximal = [sorted(Q) for Q in sets if is_clique(G, Q) and not is_maximal_clique(G, Q)]
    report["num_not_maximal"] = len(not_maximal)
    report["not_maximal_sample"] = not_maximal[:sample]

    # each maximal clique must be reported once
    seen = set()
    duplicates = []
    for Q in sets:
        if Q in seen:
            duplicates.append(sorted(Q))
        seen.add(Q)
    report["num_duplicates"] = len(duplicates)
    report["duplicates_sample"] = duplicates[:sample]

    report["valid"] = (
        len(not_cliques) == 0 and
        len(not_maximal) == 0 and
        len(duplicates) == 0
    )
    return report


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:

    valid = report.get("valid", False)
    print(f"{prefix}valid={valid}|cliques={report.get('num_cliques', -1)}|max_size={report.get('max_size', -1)}")
    if not valid:
        bad = report.get("not_cliques_sample", [])
        nm = report.get("not_maximal_sample", [])
        dup = report.get("duplicates_sample", [])
        if bad:
            print(f"{prefix}not_cliques(sample) ={bad}")
        if nm:
            print(f"{prefix}not_maximal(sample) ={nm}")
        if dup:
            print(f"{prefix}duplicates(sample) ={dup}")

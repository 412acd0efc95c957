# experiments/runner_basic.py
import argparse
import csv
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence

import networkx as nx

from clique.finder import MaximalCliqueFinder
from driver.enumerate_run import compare_with_networkx
from graph.verify import verify_cliques

FIELDNAMES = [
    "instance", "family", "n", "m", "density",
    "time_limit_sec", "num_cliques", "max_size", "num_maximum",
    "valid", "agree_networkx", "stop_reason", "runtime_sec",
]


@dataclass(frozen=True)
class Instance:
    name: str
    family: str
    graph: nx.Graph


def gen_instances(ns: Sequence[int], seeds: Sequence[int]) -> List[Instance]:
    out: List[Instance] = []
    for n in ns:
        out.append(Instance(f"K{n}", "complete", nx.complete_graph(n)))
        out.append(Instance(f"C{n}", "cycle", nx.cycle_graph(n)))
        for sd in seeds:
            for p in (0.1, 0.3, 0.5):
                out.append(Instance(f"ER_n{n}_p{p:g}_gseed{sd}", "synthetic_er",
                                    nx.erdos_renyi_graph(n=n, p=p, seed=sd)))
            if n > 3:
                out.append(Instance(f"BA_n{n}_m3_gseed{sd}", "synthetic_ba",
                                    nx.barabasi_albert_graph(n=n, m=3, seed=sd)))
            if n > 4:
                out.append(Instance(f"WS_n{n}_k4_b0.2_gseed{sd}", "synthetic_ws",
                                    nx.watts_strogatz_graph(n=n, k=4, p=0.2, seed=sd)))
    return out


def run_one(inst: Instance, time_limit: float = 0, check: bool = True) -> Dict[str, Any]:
    G = inst.graph
    t0 = time.time()
    finder = MaximalCliqueFinder(G, timeout=time_limit)
    cliques = list(finder)
    dt = time.time() - t0

    rep = verify_cliques(G, cliques) if check else {}
    agree = compare_with_networkx(G, cliques)["agree"] if check and not finder.is_time_limit_reached() else ""

    n = G.number_of_nodes()
    m = G.number_of_edges()
    return {
        "instance": inst.name,
        "family": inst.family,
        "n": n,
        "m": m,
        "density": (2.0 * m / (n * (n - 1))) if n >= 2 else 0.0,
        "time_limit_sec": time_limit,
        "num_cliques": len(cliques),
        "max_size": finder.max_size,
        "num_maximum": sum(1 for _ in finder.maximum_iterator()),
        "valid": rep.get("valid", ""),
        "agree_networkx": agree,
        "stop_reason": "time_limit" if finder.is_time_limit_reached() else "exhaustive",
        "runtime_sec": dt,
    }


def write_csv(path: Path, rows: List[Dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES, extrasaction="ignore")
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k, "") for k in FIELDNAMES})


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--ns", type=int, nargs="+", default=[20, 40, 60])
    ap.add_argument("--seeds", type=int, nargs="+", default=[0, 1, 2])
    ap.add_argument("--time", type=float, default=10.0)
    ap.add_argument("--out", default="results/runs.csv")
    ap.add_argument("--no-check", action="store_true")
    args = ap.parse_args()

    rows = []
    for inst in gen_instances(args.ns, args.seeds):
        row = run_one(inst, time_limit=args.time, check=not args.no_check)
        rows.append(row)
        print(f"[Run] {inst.name:28s} cliques={row['num_cliques']} max={row['max_size']} "
              f"stop={row['stop_reason']} t={row['runtime_sec']:.4f}s valid={row['valid']}")

    write_csv(Path(args.out), rows)
    print(f"[OK] wrote {args.out} (rows={len(rows)})")


if __name__ == "__main__":
    main()

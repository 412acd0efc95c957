# main.py
import argparse, sys

from clique.errors import CliqueError
from clique.timeunit import parse_unit
from driver.enumerate_run import run_clique_enumeration, compare_with_networkx
from graph.loader import load_graph


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate all maximal cliques of an undirected graph.")
    ap.add_argument("--graph", default="demo", help="'demo', a DIMACS .col/.clq file or an edge list")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--time", type=float, default=0, help="time budget, 0 = unbounded")
    ap.add_argument("--unit", default="seconds", help="ns|us|ms|s|min|h|d")
    ap.add_argument("--keep-selfloops", action="store_true",
                    help="keep self-loops from the input (the search then refuses the graph)")
    ap.add_argument("--maximum-only", action="store_true", help="print only maximum-size cliques")
    ap.add_argument("--compare-networkx", action="store_true")
    ap.add_argument("--viz-out", default="visualisierung/picture")
    ap.add_argument("--viz-layout-seed", type=int, default=42)
    ap.add_argument("--no-viz", action="store_true")
    ap.add_argument("--quiet", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    G = load_graph(args.graph, seed=args.seed, drop_selfloops=not args.keep_selfloops)
    try:
        res = run_clique_enumeration(G, time_limit=args.time, unit=parse_unit(args.unit), verbose=verbose)
    except CliqueError as e:
        print(f"[Error] {type(e).__name__}: {e}", file=sys.stderr)
        return 2

    shown = res["maximum_cliques"] if args.maximum_only else res["cliques"]
    for Q in shown:
        print(" ".join(str(v) for v in Q))

    if args.compare_networkx:
        cmp = compare_with_networkx(G, res["cliques"])
        print("[Compare] ours=%d | networkx=%d | agree=%s"
              % (cmp["num_ours"], cmp["num_networkx"], cmp["agree"]))

    if not args.no_viz:
        # imported here so matplotlib is only loaded when a picture is wanted
        from visualisierung.draw import visualize_cliques
        path = visualize_cliques(
            G, res["maximum_cliques"], step="Final-Cliques",
            out_dir=args.viz_out, layout_seed=args.viz_layout_seed,
            num_cliques=res["num_cliques"],
            time_limited=res["stop_reason"] == "time_limit",
        )
        if verbose:
            print(f"[Viz] wrote {path}")

    if verbose:
        print("[Main] Done. stop_reason=%s | cliques=%d | max_size=%d | time=%.4fs"
              % (res["stop_reason"], res["num_cliques"], res["max_size"], res["runtime_sec"]))
    return 0 if res["valid"] in (True, None) else 1


if __name__ == "__main__":
    sys.exit(main())

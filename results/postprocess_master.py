#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
from pathlib import Path
import pandas as pd

NUMERIC_COLS = [
    "n", "m", "density", "time_limit_sec",
    "num_cliques", "max_size", "num_maximum", "runtime_sec",
]


def to_bool(x):
    if pd.isna(x):
        return pd.NA
    s = str(x).strip().lower()
    if s in ("true", "1", "yes", "y", "t"):
        return True
    if s in ("false", "0", "no", "n", "f"):
        return False
    return pd.NA


def load_runs(path: Path) -> pd.DataFrame:
    runs = pd.read_csv(path, dtype="string")
    for c in NUMERIC_COLS:
        if c in runs.columns:
            runs[c] = pd.to_numeric(runs[c], errors="coerce")
    for c in ("valid", "agree_networkx"):
        if c in runs.columns:
            runs[c] = runs[c].apply(to_bool)
    return runs


def summarize(runs: pd.DataFrame) -> pd.DataFrame:

    def rate(x):
        x = x.dropna()
        if len(x) == 0:
            return pd.NA
        return float((x == True).mean())

    return runs.groupby(["family"], dropna=False).agg(
        runs=("instance", "size"),
        n_mean=("n", "mean"),
        cliques_mean=("num_cliques", "mean"),
        max_size_max=("max_size", "max"),
        runtime_mean_sec=("runtime_sec", "mean"),
        runtime_max_sec=("runtime_sec", "max"),
        valid_rate=("valid", rate),
        time_limit_rate=("stop_reason", lambda s: float((s == "time_limit").mean())),
    ).reset_index()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--runs", default="results/runs.csv")
    ap.add_argument("--out", default="results/summary.csv")
    args = ap.parse_args()

    src = Path(args.runs)
    if not src.exists():
        raise SystemExit(f"cannot find {src}, please run experiments/runner_basic.py first.")

    summary = summarize(load_runs(src))
    out = Path(args.out)
    summary.to_csv(out, index=False, encoding="utf-8-sig")
    print(f"[OK] wrote {out} (families={len(summary)})")


if __name__ == "__main__":
    main()

# tests/smoke_tests.py
import os, sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import networkx as nx
from driver.enumerate_run import run_clique_enumeration, compare_with_networkx
from graph.verify import verify_cliques


def run_and_check(G, expect_max=None, expect_count=None, name="Graph"):
    res = run_clique_enumeration(G, time_limit=30, verbose=False)

    assert res["stop_reason"] == "exhaustive", f"{name}: hit the time limit"
    assert res["valid"], f"{name}: invalid clique output {res['final_check']}"
    if expect_max is not None:
        assert res["max_size"] == expect_max, f"{name}: expect ω={expect_max}, got {res['max_size']}"
    if expect_count is not None:
        assert res["num_cliques"] == expect_count, f"{name}: expect {expect_count} cliques, got {res['num_cliques']}"

    cmp = compare_with_networkx(G, res["cliques"])
    assert cmp["agree"], f"{name}: differs from networkx (missing={cmp['missing']}, extra={cmp['extra']})"
    rep = verify_cliques(G, res["maximum_cliques"])
    assert rep["max_size"] == res["max_size"], f"{name}: maximum cliques have the wrong size"
    print(f"[PASS] {name:20s}  cliques={res['num_cliques']}  ω={res['max_size']}  t={res['runtime_sec']:.4f}s")
    return res


if __name__ == "__main__":

    run_and_check(nx.complete_graph(3), expect_max=3, expect_count=1, name="K3")
    run_and_check(nx.complete_graph(4), expect_max=4, expect_count=1, name="K4")
    run_and_check(nx.cycle_graph(4),    expect_max=2, expect_count=4, name="C4 (even cycle)")
    run_and_check(nx.cycle_graph(5),    expect_max=2, expect_count=5, name="C5 (odd cycle)")
    run_and_check(nx.complete_bipartite_graph(3, 4), expect_max=2, expect_count=12, name="K3,4")
    run_and_check(nx.grid_2d_graph(5, 5), expect_max=2, expect_count=40, name="Grid 5x5")
    run_and_check(nx.petersen_graph(),   expect_max=2, expect_count=15, name="Petersen")
    run_and_check(nx.turan_graph(9, 3),  expect_max=3, expect_count=27, name="Turan(9,3)")

    for i, p in enumerate([0.1, 0.3, 0.5], start=1):
        G = nx.erdos_renyi_graph(40, p, seed=i)
        run_and_check(G, expect_max=None, name=f"ER(40,{p})")

    print("All smoke tests passed.")

# tests/test_driver.py
import os

import networkx as nx

import clique.pivot as pivot_mod
import main as cli
from driver.enumerate_run import compare_with_networkx, run_clique_enumeration
from visualisierung.draw import visualize_cliques


def test_run_report_exhaustive(capsys):
    G = nx.Graph([(1, 2), (2, 3), (3, 4), (4, 1)])
    res = run_clique_enumeration(G, verbose=True)
    assert res["stop_reason"] == "exhaustive"
    assert res["num_cliques"] == 4 and res["max_size"] == 2
    assert sorted(res["maximum_cliques"]) == [[1, 2], [1, 4], [2, 3], [3, 4]]
    assert res["valid"] is True
    out = capsys.readouterr().out
    assert "[Search] cliques=4" in out
    assert "[Check] valid=True|cliques=4|max_size=2" in out


def test_run_report_time_limited(monkeypatch):
    monkeypatch.setattr(pivot_mod, "past_deadline", lambda deadline: deadline is not None)
    G = nx.erdos_renyi_graph(60, 0.3, seed=0)
    res = run_clique_enumeration(G, time_limit=1, unit="ns", verbose=False)
    assert res["stop_reason"] == "time_limit"
    assert res["num_cliques"] == 0
    assert res["valid"] is True


def test_compare_with_networkx():
    G = nx.barabasi_albert_graph(30, 3, seed=4)
    res = run_clique_enumeration(G, verbose=False)
    cmp = compare_with_networkx(G, res["cliques"])
    assert cmp["agree"], cmp
    cmp = compare_with_networkx(G, res["cliques"][1:])
    assert not cmp["agree"] and len(cmp["missing"]) == 1


def test_visualize_writes_png(tmp_path):
    G = nx.Graph([(0, 1), (1, 2), (0, 2), (2, 3)])
    path = visualize_cliques(G, [[0, 1, 2]], step="Test Run", out_dir=str(tmp_path), num_cliques=2)
    assert os.path.exists(path)
    assert os.path.basename(path).startswith("step-test-run_size-003")


def test_cli_runs_on_edge_list(tmp_path, capsys):
    p = tmp_path / "square.txt"
    p.write_text("1 2\n2 3\n3 4\n4 1\n")
    rc = cli.main(["--graph", str(p), "--no-viz", "--maximum-only", "--compare-networkx"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "agree=True" in out
    assert "stop_reason=exhaustive" in out


def test_cli_rejects_self_loops_when_kept(tmp_path, capsys):
    p = tmp_path / "loop.clq"
    p.write_text("p edge 2 2\ne 1 2\ne 2 2\n")
    rc = cli.main(["--graph", str(p), "--no-viz", "--keep-selfloops", "--quiet"])
    assert rc == 2
    assert "InvalidGraphError" in capsys.readouterr().err


def test_cli_rejects_bad_unit(capsys):
    rc = cli.main(["--time", "1", "--unit", "weeks", "--no-viz", "--quiet"])
    assert rc == 2


def test_cli_rejects_non_finite_time(capsys):
    for bad in ("inf", "nan"):
        rc = cli.main(["--time", bad, "--no-viz", "--quiet"])
        assert rc == 2, f"--time {bad}"
        assert "InvalidArgumentError" in capsys.readouterr().err

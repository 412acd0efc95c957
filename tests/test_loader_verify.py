# tests/test_loader_verify.py
import networkx as nx
import pytest

from graph.loader import load_demo_graph, load_dimacs_col, load_edgelist_txt, load_graph
from graph.verify import (
    brute_force_maximal_cliques,
    is_clique,
    is_maximal_clique,
    print_check_summary,
    verify_cliques,
)


def test_dimacs(tmp_path):
    p = tmp_path / "g.clq"
    p.write_text("c tiny\np edge 4 4\ne 1 2\ne 2 3\ne 1 3\ne 4 4\n")
    G = load_dimacs_col(p)
    assert sorted(G.nodes()) == [0, 1, 2, 3]
    assert G.number_of_edges() == 3
    G2 = load_dimacs_col(p, drop_selfloops=False)
    assert nx.number_of_selfloops(G2) == 1
    assert load_graph(str(p)).number_of_edges() == 3


def test_edgelist(tmp_path):
    p = tmp_path / "g.txt"
    p.write_text("# comment\n10 20\n20 30\nbad line\n30 30\n")
    G = load_edgelist_txt(p)
    assert sorted(G.nodes()) == [0, 1, 2]
    assert G.number_of_edges() == 2


def test_load_graph_demo_and_missing(tmp_path):
    assert load_graph("demo", seed=1).number_of_nodes() == load_demo_graph(seed=1).number_of_nodes()
    with pytest.raises(FileNotFoundError):
        load_graph(str(tmp_path / "nope.col"))


def test_clique_predicates():
    G = nx.Graph([(0, 1), (1, 2), (0, 2), (2, 3)])
    assert is_clique(G, [0, 1, 2])
    assert not is_clique(G, [0, 3])
    assert is_maximal_clique(G, {2, 3})
    assert not is_maximal_clique(G, {0, 1})


def test_brute_force_reference():
    G = nx.cycle_graph(4)
    assert set(brute_force_maximal_cliques(G)) == {frozenset(e) for e in G.edges()}
    assert brute_force_maximal_cliques(nx.Graph()) == []


def test_verify_report_flags_problems():
    G = nx.complete_graph(3)
    rep = verify_cliques(G, [{0, 1, 2}, {0, 1}, {0, 1, 2}])
    assert not rep["valid"]
    assert rep["num_not_maximal"] == 1
    assert rep["num_duplicates"] == 1
    assert rep["max_size"] == 3
    G.add_node(9)
    rep = verify_cliques(G, [{0, 9}])
    assert rep["num_not_cliques"] == 1
    assert verify_cliques(G, [{0, 1, 2}, {9}])["valid"]


def test_check_summary_lists_problems(capsys):
    G = nx.Graph([(0, 1), (1, 2), (0, 2)])
    G.add_node(3)
    rep = verify_cliques(G, [{0, 1}, {0, 3}, {3}, {3}])
    print_check_summary(rep, prefix="[T] ")
    out = capsys.readouterr().out
    assert "[T] valid=False|cliques=4|max_size=2" in out
    assert "[T] not_cliques(sample) =[[0, 3]]" in out
    assert "[T] not_maximal(sample) =[[0, 1]]" in out
    assert "[T] duplicates(sample) =[[3]]" in out


def test_check_summary_valid_is_one_line(capsys):
    G = nx.complete_graph(3)
    print_check_summary(verify_cliques(G, [{0, 1, 2}]))
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["[Check] valid=True|cliques=1|max_size=3"]

import pytest

from editalign.exceptions import EditAlignError, MissingEdge
from editalign.graph.weighted_digraph import WeightedDiGraph


def test_from_triples(triangle):
    assert sorted(triangle.nodes) == ["a", "b", "c"]
    assert sorted(triangle.weighted_edges()) == [
        ("a", "b", 2),
        ("a", "c", 6),
        ("b", "c", 3),
    ]


def test_from_triples_rejects_partial_triple():
    with pytest.raises(ValueError, match="triples"):
        WeightedDiGraph.from_triples("a", "b", 1, "c")


def test_weight(triangle):
    assert triangle.weight("a", "b") == 2
    assert triangle.weight("b", "c") == 3
    assert triangle.weight("a", "c") == 6


def test_weight_missing_edge(triangle):
    """Weights are only attached to existing edges."""
    with pytest.raises(MissingEdge, match="No edge"):
        triangle.weight("c", "a")
    with pytest.raises(KeyError):
        triangle.weight("a", "zzz")


def test_add_edge_overwrites_weight(triangle):
    triangle.add_edge("a", "b", 7)
    assert triangle.weight("a", "b") == 7
    assert triangle.number_of_edges() == 3


def test_add_edge_creates_nodes():
    g = WeightedDiGraph()
    g.add_edge("x", "y", 0.5)
    assert "x" in g and "y" in g
    assert g.weight("x", "y") == 0.5


def test_self_loop_allowed():
    g = WeightedDiGraph()
    g.add_edge("x", "x", 1)
    assert g.weight("x", "x") == 1
    assert list(g.each_adjacent("x")) == ["x"]


def test_remove_edge(triangle):
    triangle.remove_edge("a", "c")
    assert not triangle.has_edge("a", "c")
    assert "c" in triangle
    with pytest.raises(MissingEdge):
        triangle.weight("a", "c")


def test_remove_missing_edge(triangle):
    with pytest.raises(MissingEdge, match="to remove"):
        triangle.remove_edge("c", "a")
    with pytest.raises(EditAlignError):
        triangle.remove_edge("c", "b")


def test_each_adjacent(triangle):
    assert sorted(triangle.each_adjacent("a")) == ["b", "c"]
    assert sorted(triangle.each_adjacent("b")) == ["c"]
    assert list(triangle.each_adjacent("c")) == []


def test_each_adjacent_tolerates_removal(triangle):
    for n in triangle.each_adjacent("a"):
        triangle.remove_edge("a", n)
    assert list(triangle.each_adjacent("a")) == []


def test_isolates(triangle):
    assert triangle.isolates() == []
    triangle.remove_edge("b", "c")
    triangle.remove_edge("a", "c")
    assert triangle.isolates() == ["c"]


def test_path_weight(triangle):
    assert triangle.path_weight(["a", "b", "c"]) == 5
    assert triangle.path_weight(["a"]) == 0
    with pytest.raises(MissingEdge):
        triangle.path_weight(["c", "a"])


def test_stringification(triangle):
    assert str(triangle) == "(a-2-b)\n(a-6-c)\n(b-3-c)"
    triangle.remove_edge("b", "c")
    triangle.remove_edge("a", "c")
    assert str(triangle) == "(a-2-b)\nc"


def test_copy_through_constructor(triangle):
    copy = WeightedDiGraph(triangle)
    triangle.remove_edge("a", "b")
    assert copy.weight("a", "b") == 2

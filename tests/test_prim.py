import pytest

from dskit.adjacency_matrix import AdjacencyMatrixGraph
from dskit.prim import minimum_spanning_tree

EDGES = [
    (1, 2, 6), (1, 3, 1), (1, 4, 5), (2, 3, 5), (3, 4, 5),
    (2, 5, 3), (3, 5, 6), (3, 6, 4), (4, 6, 2), (5, 6, 6),
]


def make_graph():
    return AdjacencyMatrixGraph([1, 2, 3, 4, 5, 6], EDGES)


def test_tree_has_n_minus_one_edges_and_spans():
    graph = make_graph()
    tree = minimum_spanning_tree(graph, 1)
    assert len(tree) == len(graph.vertices) - 1
    reached = {1} | {v for _, v, _ in tree}
    assert reached == set(graph.vertices)


def test_each_edge_grows_from_the_tree():
    graph = make_graph()
    seen = {1}
    for u, v, w in minimum_spanning_tree(graph, 1):
        assert u in seen
        assert v not in seen
        assert graph.weight(graph.locate(u), graph.locate(v)) == w
        seen.add(v)


def test_first_edge_is_lightest_at_start():
    graph = make_graph()
    first = minimum_spanning_tree(graph, 1)[0]
    assert first == (1, 3, 1)


def test_triangle_total_weight():
    graph = AdjacencyMatrixGraph("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
    tree = minimum_spanning_tree(graph, "A")
    assert sum(w for _, _, w in tree) == 3


def test_single_vertex_has_empty_tree():
    graph = AdjacencyMatrixGraph(["X"], [])
    assert minimum_spanning_tree(graph, "X") == []


def test_disconnected_graph_raises():
    graph = AdjacencyMatrixGraph("ABC", [("A", "B", 1)])
    with pytest.raises(ValueError):
        minimum_spanning_tree(graph, "A")


def test_unknown_start_raises():
    with pytest.raises(ValueError):
        minimum_spanning_tree(make_graph(), 42)
import pytest

from dskit.adjacency_list import AdjacencyListGraph, Arc


def test_locate_returns_index():
    graph = AdjacencyListGraph("ABC")
    assert graph.locate("C") == 2


def test_locate_unknown_vertex_raises():
    graph = AdjacencyListGraph("ABC")
    with pytest.raises(ValueError):
        graph.locate("Z")


def test_duplicate_vertices_rejected():
    with pytest.raises(ValueError):
        AdjacencyListGraph("ABA")


def test_edge_with_unknown_vertex_rejected():
    with pytest.raises(ValueError):
        AdjacencyListGraph("AB", [("A", "Q")])


def test_malformed_edge_rejected():
    with pytest.raises(ValueError):
        AdjacencyListGraph("AB", [("A",)])


def test_undirected_edge_appears_both_ways():
    graph = AdjacencyListGraph("ABC", [("A", "B")])
    assert graph.neighbors(graph.locate("A")) == [graph.locate("B")]
    assert graph.neighbors(graph.locate("B")) == [graph.locate("A")]
    assert graph.neighbors(graph.locate("C")) == []


def test_directed_edge_only_one_way():
    graph = AdjacencyListGraph("AB", [("A", "B", 5)], directed=True)
    assert graph.arcs(0) == (Arc(1, 5),)
    assert graph.arcs(1) == ()


def test_arcs_keep_insertion_order():
    graph = AdjacencyListGraph("ABCD", [("A", "D"), ("A", "B"), ("A", "C")])
    assert graph.neighbors(0) == [3, 1, 2]


def test_in_degrees_sum_to_arc_count():
    edges = [("A", "B"), ("A", "C"), ("B", "C"), ("C", "D")]
    graph = AdjacencyListGraph("ABCD", edges, directed=True)
    degrees = graph.in_degrees()
    assert sum(degrees) == len(edges)
    assert degrees[graph.locate("A")] == 0


def test_undirected_in_degrees_count_both_ends():
    edges = [("A", "B"), ("B", "C")]
    graph = AdjacencyListGraph("ABC", edges)
    assert sum(graph.in_degrees()) == 2 * len(edges)


def test_dfs_and_bfs_orders():
    graph = AdjacencyListGraph("ABCD", [("A", "B"), ("A", "C"), ("B", "D")])
    assert graph.dfs() == ["A", "B", "D", "C"]
    assert graph.bfs() == ["A", "B", "C", "D"]


def test_dfs_on_path_follows_path():
    graph = AdjacencyListGraph("ABCD", [("A", "B"), ("B", "C"), ("C", "D")])
    assert graph.dfs() == list("ABCD")


@pytest.mark.parametrize("method", ["dfs", "bfs"])
def test_traversals_visit_every_vertex_once(method):
    graph = AdjacencyListGraph("ABCDEF", [("A", "B"), ("C", "D"), ("D", "E")])
    order = getattr(graph, method)()
    assert sorted(order) == list("ABCDEF")
    assert order[0] == "A"


def test_traversals_of_empty_graph():
    graph = AdjacencyListGraph([])
    assert graph.dfs() == []
    assert graph.bfs() == []
"""Tests for Graph / GraphNode / GraphEdge: validation, queries, import."""

import math

import pytest

from graph import Graph, GraphEdge, GraphNode, InvalidGraphError


def _triangle():
    nodes = [GraphNode("A"), GraphNode("B"), GraphNode("C")]
    edges = [GraphEdge("A", "B", 1), GraphEdge("B", "C", 2), GraphEdge("A", "C", 3)]
    return Graph(nodes, edges)


def test_input_order_is_kept():
    g = _triangle()
    assert g.node_ids() == ["A", "B", "C"]
    assert [e.weight for e in g.edges] == [1, 2, 3]


def test_neighbours_and_degree():
    g = _triangle()
    assert [n for n, _ in g.neighbours("A")] == ["B", "C"]
    assert g.degree("B") == 2
    assert g.edges_of("C") == [g.edges[1], g.edges[2]]
    assert g.edge_indices_of("C") == [1, 2]


def test_get_edge_between_picks_lightest_parallel_edge():
    g = Graph(
        [GraphNode("A"), GraphNode("B")],
        [GraphEdge("A", "B", 5), GraphEdge("B", "A", 2)],
    )
    assert g.get_edge_between("A", "B").weight == 2
    assert g.get_edge_between("B", "A").weight == 2
    assert g.get_edge_between("A", "Z") is None


def test_self_loop_counted_once():
    g = Graph([GraphNode("A")], [GraphEdge("A", "A", 1)])
    assert g.degree("A") == 1


def test_total_weight():
    g = _triangle()
    assert Graph.total_weight(g.edges) == 6


def test_duplicate_node_rejected():
    with pytest.raises(InvalidGraphError):
        Graph([GraphNode("A"), GraphNode("A")])


def test_dangling_edge_rejected():
    with pytest.raises(InvalidGraphError):
        Graph([GraphNode("A")], [GraphEdge("A", "B", 1)])


@pytest.mark.parametrize("weight", [0, -1, math.inf, math.nan, "3", True, None])
def test_bad_weight_rejected(weight):
    with pytest.raises(InvalidGraphError):
        Graph([GraphNode("A"), GraphNode("B")], [GraphEdge("A", "B", weight)])


def test_invalid_graph_error_is_value_error():
    assert issubclass(InvalidGraphError, ValueError)


def test_dict_round_trip():
    g = _triangle()
    again = Graph.from_dict(g.to_dict())
    assert again.nodes == g.nodes
    assert again.edges == g.edges


def test_from_dict_defaults():
    g = Graph.from_dict({"nodes": [{"id": 1}, {"id": 2}], "edges": [{"source": 1, "target": 2}]})
    assert g.node_ids() == ["1", "2"]
    assert g.edges[0].weight == 1


def test_from_dict_malformed_payload():
    with pytest.raises(InvalidGraphError):
        Graph.from_dict({"nodes": [{"x": 1}]})
    with pytest.raises(InvalidGraphError):
        Graph.from_dict({"nodes": [{"id": "A"}], "edges": [{"source": "A"}]})


def test_empty_graph():
    g = Graph()
    assert g.is_empty()
    assert g.node_count() == 0 and g.edge_count() == 0


def test_adjacency_list_import():
    g = Graph.from_adjacency_list("""
        A: B(3) C
        B: A(3) D(2)
        # comment
        C -> D(1.5)
    """)
    assert g.node_ids() == ["A", "B", "C", "D"]
    pairs = [(e.source, e.target, e.weight) for e in g.edges]
    assert pairs == [("A", "B", 3), ("A", "C", 1), ("B", "D", 2), ("C", "D", 1.5)]
    assert isinstance(g.edges[0].weight, int)


def test_adjacency_list_bad_line():
    with pytest.raises(InvalidGraphError):
        Graph.from_adjacency_list("A B C")
    with pytest.raises(InvalidGraphError):
        Graph.from_adjacency_list("A: B(x)")


def test_edge_helpers():
    e = GraphEdge("A", "B", 4)
    assert e.connects("B", "A")
    assert e.other_end("A") == "B"
    assert e.other_end("Z") is None
    assert e.touches("B") and not e.touches("C")
    assert GraphEdge.from_dict(e.to_dict()) == e

"""Tests for the graph family: Kruskal, Prim, Floyd–Warshall."""

import itertools
import math
import random

import pytest

from algorithms.graphs import REGISTRY, GraphAlgorithm, get_algorithm, run
from algorithms.graphs.disjoint_set import DisjointSet
from algorithms.graphs.floyd_warshall import initial_distances
from algorithms.registry import UnknownAlgorithmError
from graph import Graph, GraphEdge, GraphNode


def _graph(node_ids, edges):
    return Graph(
        [GraphNode(n) for n in node_ids],
        [GraphEdge(a, b, w) for a, b, w in edges],
    )


def _path_graph():
    """A –2– B –3– C, no direct A–C edge."""
    return _graph("ABC", [("A", "B", 2), ("B", "C", 3)])


def _random_connected_graph(seed, n=8, extra=10):
    rng = random.Random(seed)
    ids = [f"n{i}" for i in range(n)]
    weights = iter(rng.sample(range(1, 200), n - 1 + extra))
    edges = [(ids[i], ids[rng.randrange(i)], next(weights)) for i in range(1, n)]
    for _ in range(extra):
        a, b = rng.sample(ids, 2)
        edges.append((a, b, next(weights)))
    return _graph(ids, edges)


def _final_distances(graph):
    steps = run(graph, "floyd-warshall")
    return steps[-1].distances if steps else initial_distances(graph)


# ---------------------------------------------------------------------------
# Three-node path graph
# ---------------------------------------------------------------------------
def test_floyd_warshall_path_graph():
    steps = run(_path_graph(), "floyd-warshall")
    final = steps[-1]
    assert final.distance("A", "C") == 5
    assert final.distance("C", "A") == 5
    assert final.distance("A", "B") == 2
    assert [s.visited_nodes for s in steps] == [("A", "C", "B"), ("C", "A", "B")]


def test_kruskal_path_graph():
    steps = run(_path_graph(), "kruskal")
    ab, bc = _path_graph().edges
    assert [s.mst for s in steps] == [(), (ab,), (ab,), (ab, bc)]
    assert steps[-1].mst_weight == 5


def test_prim_path_graph():
    steps = run(_path_graph(), "prim")
    assert len(steps) == 2
    assert steps[-1].visited_nodes == ("A", "B", "C")
    assert steps[-1].mst_weight == 5
    assert {(e.source, e.target) for e in steps[-1].mst} == {("A", "B"), ("B", "C")}


# ---------------------------------------------------------------------------
# Kruskal
# ---------------------------------------------------------------------------
def test_kruskal_considers_every_edge_in_weight_order():
    g = _graph("ABCD", [("A", "B", 4), ("B", "C", 1), ("C", "D", 3), ("A", "D", 2), ("A", "C", 5)])
    steps = run(g, "kruskal")
    considered = [s.visited_edges[0].weight for s in steps if s.visited_edges[0] not in s.mst]
    assert considered == [1, 2, 3, 4, 5]


def test_kruskal_skips_cycle_edges():
    g = _graph("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
    steps = run(g, "kruskal")
    # 3 considered + 2 accepted
    assert len(steps) == 5
    assert [e.weight for e in steps[-1].mst] == [1, 2]


def test_kruskal_equal_weights_keep_input_order():
    g = _graph("ABC", [("B", "C", 1), ("A", "B", 1), ("A", "C", 1)])
    mst = run(g, "kruskal")[-1].mst
    assert [(e.source, e.target) for e in mst] == [("B", "C"), ("A", "B")]


def test_kruskal_disconnected_gives_forest():
    g = _graph("ABCD", [("A", "B", 1), ("C", "D", 2)])
    assert len(run(g, "kruskal")[-1].mst) == 2


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
def test_prim_starts_from_first_node():
    g = _graph("CAB", [("A", "B", 1), ("C", "A", 5), ("C", "B", 2)])
    steps = run(g, "prim")
    assert steps[0].visited_nodes == ("C", "B")
    assert steps[1].visited_nodes == ("C", "B", "A")


def test_prim_picks_lighter_parallel_edge():
    g = _graph("AB", [("A", "B", 7), ("A", "B", 3)])
    steps = run(g, "prim")
    assert len(steps) == 1
    assert steps[0].mst_weight == 3


def test_prim_disconnected_stops_at_component():
    g = _graph("ABCD", [("A", "B", 1), ("C", "D", 2)])
    steps = run(g, "prim")
    assert len(steps) == 1
    assert steps[-1].visited_nodes == ("A", "B")


def test_prim_ignores_self_loops():
    g = _graph("AB", [("A", "A", 1), ("A", "B", 4)])
    steps = run(g, "prim")
    assert [e.weight for e in steps[-1].mst] == [4]


@pytest.mark.parametrize("seed", range(6))
def test_kruskal_and_prim_agree_on_mst_weight(seed):
    g = _random_connected_graph(seed)
    kruskal = run(g, "kruskal")[-1]
    prim = run(g, "prim")[-1]
    assert kruskal.mst_weight == prim.mst_weight
    assert len(kruskal.mst) == len(prim.mst) == g.node_count() - 1


# ---------------------------------------------------------------------------
# Floyd–Warshall
# ---------------------------------------------------------------------------
def test_floyd_warshall_complete_metric_gives_empty_trace():
    g = _graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 1)])
    assert run(g, "floyd-warshall") == []


@pytest.mark.parametrize("seed", range(6))
def test_floyd_warshall_triangle_inequality(seed):
    g = _random_connected_graph(seed)
    dist = _final_distances(g)
    ids = g.node_ids()
    for i, j, k in itertools.product(ids, repeat=3):
        assert dist[(i, j)] <= dist[(i, k)] + dist[(k, j)]


def test_floyd_warshall_steps_only_on_strict_improvement():
    g = _random_connected_graph(3)
    steps = run(g, "floyd-warshall")
    prev = initial_distances(g)
    for s in steps:
        i, j, _ = s.visited_nodes
        assert s.distances[(i, j)] < prev[(i, j)]
        prev = s.distances


def test_floyd_warshall_snapshots_are_read_only_and_independent():
    steps = run(_path_graph(), "floyd-warshall")
    with pytest.raises(TypeError):
        steps[0].distances[("A", "C")] = 0
    # the (C, A) improvement came after the first snapshot was taken
    assert math.isinf(steps[0].distances[("C", "A")])


def test_floyd_warshall_uses_lightest_parallel_edge():
    g = _graph("AB", [("A", "B", 9), ("B", "A", 4)])
    assert initial_distances(g)[("A", "B")] == 4


def test_floyd_warshall_infinity_serialises_as_null():
    g = _graph("ABCD", [("A", "B", 1), ("B", "C", 1)])
    payload = run(g, "floyd-warshall")[-1].to_dict()
    assert payload["distances"]["A->C"] == 2
    assert payload["distances"]["A->D"] is None


def test_distance_on_step_without_table():
    step = run(_path_graph(), "kruskal")[0]
    with pytest.raises(ValueError):
        step.distance("A", "B")


# ---------------------------------------------------------------------------
# Empty input & dispatch
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("name", [a.value for a in GraphAlgorithm])
def test_empty_graph_gives_empty_trace(name):
    assert run(Graph(), name) == []


def test_registry_is_exhaustive():
    assert set(REGISTRY) == set(GraphAlgorithm)


def test_name_resolution():
    assert get_algorithm("Floyd_Warshall").key == "floyd-warshall"


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        run(_path_graph(), "boruvka")


# ---------------------------------------------------------------------------
# DisjointSet
# ---------------------------------------------------------------------------
def test_disjoint_set_union_and_find():
    ds = DisjointSet("ABCDE")
    assert ds.union("A", "B")
    assert ds.union("C", "D")
    assert not ds.union("B", "A")
    assert ds.connected("A", "B")
    assert not ds.connected("A", "C")
    assert ds.union("B", "D")
    assert ds.connected("A", "C")
    assert not ds.connected("A", "E")


def test_disjoint_set_compresses_paths():
    ds = DisjointSet("ABCD")
    ds.union("A", "B")
    ds.union("C", "D")
    ds.union("A", "C")
    root = ds.find("D")
    assert all(ds.parent[x] == root for x in "ABCD")

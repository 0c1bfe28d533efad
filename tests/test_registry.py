"""Tests for the top-level algorithm registry and input coercion."""

import pytest

from algorithms import (
    Family,
    UnknownAlgorithmError,
    algorithms_by_tag,
    build_input,
    catalogue,
    get_algorithm,
    list_algorithms,
    resolve_family,
    run,
)
from algorithms.registry import check_exhaustive, resolve
from graph import Graph
from grid import Grid


def test_family_resolution():
    assert resolve_family("Graph") is Family.GRAPH
    assert resolve_family(Family.SORTING) is Family.SORTING
    with pytest.raises(UnknownAlgorithmError):
        resolve_family("geometry")


def test_list_algorithms_in_registration_order():
    keys = [a.key for a in list_algorithms()]
    assert keys[:2] == ["bfs", "dfs"]
    assert keys[-3:] == ["kruskal", "prim", "floyd-warshall"]
    assert len(keys) == 15


def test_get_algorithm_returns_none_when_unknown():
    assert get_algorithm("sorting", "bogo") is None
    assert get_algorithm("geometry", "bubble") is None
    assert get_algorithm("pathfinding", "astar").label == "A* Search"


def test_algorithms_by_tag():
    assert {a.key for a in algorithms_by_tag("mst")} == {"kruskal", "prim"}


def test_catalogue_is_serialisable():
    cat = catalogue()
    assert set(cat) == {"pathfinding", "sorting", "graph"}
    assert all("fn" not in a for entries in cat.values() for a in entries)


def test_build_input_variants():
    assert isinstance(build_input("pathfinding", ["SE"]), Grid)
    assert isinstance(build_input("pathfinding", "S.\n.E"), Grid)
    assert isinstance(build_input("pathfinding", {"rows": 1, "cols": 1}), Grid)
    assert build_input("sorting", (3, 1)) == [3, 1]
    assert isinstance(build_input("graph", {"nodes": [], "edges": []}), Graph)

    g = Graph()
    assert build_input("graph", g) is g


@pytest.mark.parametrize("family, data", [
    ("pathfinding", 42),
    ("sorting", "31"),
    ("sorting", {"a": 1}),
    ("graph", ["A", "B"]),
])
def test_build_input_rejects(family, data):
    with pytest.raises(ValueError):
        build_input(family, data)


def test_run_dispatches_by_family():
    assert run("sorting", [2, 1], "bubble")[-1].array == (1, 2)
    assert run(Family.PATHFINDING, ["SE"], "dfs")[-1].has_path


def test_resolve_passes_members_through():
    assert resolve(Family, Family.GRAPH) is Family.GRAPH


def test_check_exhaustive_flags_missing_member():
    with pytest.raises(RuntimeError):
        check_exhaustive(Family, {Family.GRAPH: None})

"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import run, Family, get_algorithm, list_algorithms

    steps = run("pathfinding", grid, "astar")
    steps = run(Family.SORTING, [3, 1, 2], "bubble")
    steps = run("graph", graph, "kruskal")

Three families, each with its own closed Enum of algorithm names and a
REGISTRY of AlgoInfo cards (see the family sub-packages).  This module
only dispatches by family and converts raw JSON-ish input (dicts, lists
of strings) into the family's input model.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from algorithms import graphs, pathfinding, sorting
from algorithms.registry import AlgoInfo, UnknownAlgorithmError, resolve
from algorithms.step import GraphStep, PathStep, SortStep, Step
from graph import Graph
from grid import Grid


class Family(str, Enum):
    PATHFINDING = "pathfinding"
    SORTING     = "sorting"
    GRAPH       = "graph"


_FAMILIES = {
    Family.PATHFINDING: pathfinding,
    Family.SORTING:     sorting,
    Family.GRAPH:       graphs,
}


def resolve_family(name: Union[str, Family]) -> Family:
    try:
        return resolve(Family, name)
    except UnknownAlgorithmError:
        raise UnknownAlgorithmError(
            f"Unknown family: {name!r} (expected one of: {', '.join(f.value for f in Family)})"
        ) from None


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------
def build_input(family: Union[str, Family], data: Any) -> Union[Grid, List, Graph]:
    """
    Accept either the family's model object or its raw form:

        pathfinding : Grid | {"rows", "cols", "walls", "start", "end"} | ["S.#", "..E"]
        sorting     : any sequence of numbers
        graph       : Graph | {"nodes": [...], "edges": [...]}
    """
    fam = resolve_family(family)
    if fam is Family.PATHFINDING:
        if isinstance(data, Grid):
            return data
        if isinstance(data, dict):
            return Grid.from_dict(data)
        if isinstance(data, (list, tuple, str)):
            return Grid.from_strings(data)
        raise ValueError(f"cannot build a grid from {type(data).__name__}")
    if fam is Family.SORTING:
        if isinstance(data, (str, bytes, dict)) or not isinstance(data, Sequence):
            raise ValueError(f"cannot sort a {type(data).__name__}")
        return sorting.validate_values(data)
    if isinstance(data, Graph):
        return data
    if isinstance(data, dict):
        return Graph.from_dict(data)
    raise ValueError(f"cannot build a graph from {type(data).__name__}")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def run(family: Union[str, Family], data: Any, algorithm: str) -> List[Step]:
    """Run `algorithm` from `family` on `data` and return the full trace."""
    fam = resolve_family(family)
    return _FAMILIES[fam].run(build_input(fam, data), algorithm)


def get_algorithm(family: Union[str, Family], key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by family + key, or None."""
    try:
        return _FAMILIES[resolve_family(family)].get_algorithm(key)
    except UnknownAlgorithmError:
        return None


def list_algorithms(family: Optional[Union[str, Family]] = None) -> List[AlgoInfo]:
    """All registered algorithms (optionally one family) in registration order."""
    fams = [resolve_family(family)] if family is not None else list(Family)
    return [info for fam in fams for info in _FAMILIES[fam].REGISTRY.values()]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in list_algorithms() if tag in a.tags]


def catalogue() -> Dict[str, List[Dict]]:
    return {fam.value: [a.to_dict() for a in list_algorithms(fam)] for fam in Family}


__all__ = [
    "AlgoInfo",
    "Family",
    "GraphStep",
    "PathStep",
    "SortStep",
    "Step",
    "UnknownAlgorithmError",
    "algorithms_by_tag",
    "build_input",
    "catalogue",
    "get_algorithm",
    "list_algorithms",
    "resolve_family",
    "run",
]

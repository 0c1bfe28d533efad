"""
step.py — Algorithm Step Snapshots
===================================
Every algorithm is a generator that yields Step objects.  A Step is a
frozen-in-time record of one externally meaningful state transition;
the full ordered list of them is the trace a caller replays.

One Step type per family, all structurally alike:

    • PathStep  – cells touched in this step + the path once the goal is found
    • SortStep  – full array snapshot + indices compared OR just mutated
    • GraphStep – nodes / edges touched + MST-so-far or a distance table

Design decisions:
  - Steps are frozen dataclasses holding tuples (and, for distances, a
    read-only mapping).  The algorithm generator is the only writer;
    once a Step is yielded nothing can change it, so historical Steps
    stay valid while the algorithm keeps going.
  - SortStep and GraphStep are SNAPSHOTS: seeking to step k needs only
    step k.  PathStep is visitation-only: "everything visited so far" is
    the union of steps 0..k (see engine.replay).
  - `to_dict()` gives a JSON-safe form; +∞ distances become None.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from graph import GraphEdge
from grid import Cell


Number = Union[int, float]
NodePair = Tuple[str, str]


# ---------------------------------------------------------------------------
# Pathfinding
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PathStep:
    """
    Attributes:
        visited : Cells touched in this step, in playback order (never empty).
        path    : Start → end cells; empty unless this step found the goal.
    """

    visited: Tuple[Cell, ...]
    path:    Tuple[Cell, ...] = ()

    @property
    def has_path(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visited": [list(c.coord) for c in self.visited],
            "path":    [list(c.coord) for c in self.path],
        }


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SortStep:
    """
    Attributes:
        array             : Full copy of the sequence at this instant.
        comparing_indices : Indices under comparison (compare steps only).
        swapped_indices   : Indices just written (mutation steps only).
    """

    array:             Tuple[Number, ...]
    comparing_indices: Tuple[int, ...] = ()
    swapped_indices:   Tuple[int, ...] = ()

    @property
    def is_compare(self) -> bool:
        return bool(self.comparing_indices)

    @property
    def is_swap(self) -> bool:
        return bool(self.swapped_indices)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array":             list(self.array),
            "comparing_indices": list(self.comparing_indices),
            "swapped_indices":   list(self.swapped_indices),
        }


class StepBuilder:
    """
    Mutable working array that sorting algorithms act on; every
    operation returns the SortStep describing it.

    Usage inside an algorithm generator:
        sb = StepBuilder(values)
        yield sb.compare(j, j + 1)
        if sb[j] > sb[j + 1]:
            yield sb.swap(j, j + 1)
        ...
        sb.result()   # the sorted list
    """

    def __init__(self, values: Sequence[Number]):
        self._arr: List[Number] = list(values)   # defensive copy; caller's list is never touched

    def __len__(self) -> int:
        return len(self._arr)

    def __getitem__(self, idx: int) -> Number:
        return self._arr[idx]

    def compare(self, *indices: int) -> SortStep:
        return SortStep(array=tuple(self._arr), comparing_indices=tuple(indices))

    def swap(self, i: int, j: int) -> SortStep:
        self._arr[i], self._arr[j] = self._arr[j], self._arr[i]
        return SortStep(array=tuple(self._arr), swapped_indices=(i, j))

    def rotate_into(self, src: int, dst: int) -> SortStep:
        """Move the element at src down to dst, shifting dst..src-1 up by one."""
        value = self._arr.pop(src)
        self._arr.insert(dst, value)
        return SortStep(array=tuple(self._arr), swapped_indices=(dst,))

    def mark_written(self, idx: int) -> SortStep:
        return SortStep(array=tuple(self._arr), swapped_indices=(idx,))

    def result(self) -> List[Number]:
        return list(self._arr)


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphStep:
    """
    Attributes:
        visited_nodes : Node ids touched in this step.
        visited_edges : Edges touched in this step.
        mst           : Cumulative MST edges (Kruskal / Prim only).
        distances     : {(i, j): dist} for every ordered node pair
                        (Floyd–Warshall only).
    """

    visited_nodes: Tuple[str, ...]
    visited_edges: Tuple[GraphEdge, ...] = ()
    mst:           Optional[Tuple[GraphEdge, ...]] = None
    distances:     Optional[Mapping[NodePair, float]] = None

    @property
    def mst_weight(self) -> Optional[float]:
        if self.mst is None:
            return None
        return sum(e.weight for e in self.mst)

    def distance(self, a: str, b: str) -> float:
        if self.distances is None:
            raise ValueError("this step carries no distance table")
        return self.distances[(a, b)]

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "visited_nodes": list(self.visited_nodes),
            "visited_edges": [e.to_dict() for e in self.visited_edges],
        }
        if self.mst is not None:
            out["mst"] = [e.to_dict() for e in self.mst]
        if self.distances is not None:
            out["distances"] = {
                f"{a}->{b}": (None if math.isinf(d) else d)
                for (a, b), d in self.distances.items()
            }
        return out


def distance_snapshot(dist: Mapping[NodePair, float]) -> Mapping[NodePair, float]:
    """Read-only copy of a distance table, safe to store in a GraphStep."""
    return MappingProxyType(dict(dist))


Step = Union[PathStep, SortStep, GraphStep]

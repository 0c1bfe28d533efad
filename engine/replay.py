"""
replay.py — Cumulative state at a step index
=============================================
Sorting and Floyd–Warshall steps are full snapshots, so step k alone
describes the state after k transitions.  Visitation steps (pathfinding
cells, graph node ids) are not: "everything visited so far" is the
ordered union of steps 0..k.

VisitAccumulator builds that union incrementally while playback moves
forward one step at a time; `visited_until` rebuilds it from step 0 for
an arbitrary seek.  Both produce the same sequence for the same index.
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Sequence, Set, Tuple

from algorithms.step import GraphStep, PathStep, Step
from grid import Cell


def _touched(step: Step) -> Tuple[Hashable, ...]:
    if isinstance(step, PathStep):
        return step.visited
    if isinstance(step, GraphStep):
        return step.visited_nodes
    return ()


class VisitAccumulator:
    """Ordered, de-duplicated union of the items touched by consumed steps."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.items:    List[Hashable] = []
        self._seen:    Set[Hashable] = set()
        self.consumed: int = 0
        self.path:     Tuple[Cell, ...] = ()

    def add(self, step: Step) -> None:
        for item in _touched(step):
            if item not in self._seen:
                self._seen.add(item)
                self.items.append(item)
        if isinstance(step, PathStep) and step.path:
            self.path = step.path
        self.consumed += 1

    def rebuild(self, steps: Sequence[Step], index: int) -> None:
        self.reset()
        for step in steps[: index + 1]:
            self.add(step)


def visited_until(steps: Sequence[Step], index: int) -> List[Hashable]:
    acc = VisitAccumulator()
    acc.rebuild(steps, index)
    return acc.items


def path_until(steps: Sequence[Step], index: int) -> Tuple[Cell, ...]:
    """The most recent path found at or before `index` (empty if none yet)."""
    for step in reversed(steps[: index + 1]):
        if isinstance(step, PathStep) and step.path:
            return step.path
    return ()


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs to draw step `index` in isolation."""

    index:   int
    total:   int
    step:    Step
    visited: Tuple[Hashable, ...]
    path:    Tuple[Cell, ...]

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "index":   self.index,
            "total":   self.total,
            "is_last": self.is_last,
            "step":    self.step.to_dict(),
        }
        if isinstance(self.step, PathStep):
            out["visited_so_far"] = [list(c.coord) for c in self.visited]
            out["path"] = [list(c.coord) for c in self.path]
        elif isinstance(self.step, GraphStep):
            out["visited_so_far"] = list(self.visited)
        return out


def frame_at(steps: Sequence[Step], index: int) -> Optional[Frame]:
    """Frame for step `index` computed by replay from 0, or None if out of range."""
    if not 0 <= index < len(steps):
        return None
    acc = VisitAccumulator()
    acc.rebuild(steps, index)
    return Frame(index=index, total=len(steps), step=steps[index],
                 visited=tuple(acc.items), path=acc.path)


__all__ = [
    "Frame",
    "VisitAccumulator",
    "frame_at",
    "path_until",
    "visited_until",
]

"""
search.py — Shared pathfinding helpers
=======================================
Neighbour generation, per-run search records and path reconstruction.

Per-run records replace any search state on the grid itself: each run
creates a fresh SearchRecords table keyed by (row, col), so nothing
leaks from one run into the next and the grid never needs a reset.
"""

import math
from typing import Dict, List, NamedTuple, Optional, Tuple

from grid import Cell, Coord, Grid


# up, down, left, right
ORTHOGONAL: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL:   Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
OCTILE_DIRS = ORTHOGONAL + DIAGONAL

INF = math.inf


def neighbours(grid: Grid, cell: Cell) -> List[Cell]:
    """Non-wall orthogonal neighbours in the order up, down, left, right."""
    out = []
    for dr, dc in ORTHOGONAL:
        r, c = cell.row + dr, cell.col + dc
        if grid.is_walkable(r, c):
            out.append(grid.cell(r, c))
    return out


def edge_cost(a: Cell, b: Cell) -> float:
    """Uniform grid: every orthogonal move costs 1."""
    return 1


class SearchRecord(NamedTuple):
    distance:  float
    came_from: Optional[Coord]


class SearchRecords:
    """
    {coord: SearchRecord} owned by exactly one algorithm run.

    Records are immutable tuples; an update replaces the record rather
    than editing it.  Coordinates never touched read as (+∞, None).
    """

    _UNSEEN = SearchRecord(INF, None)

    def __init__(self, origin: Cell):
        self._records: Dict[Coord, SearchRecord] = {origin.coord: SearchRecord(0, None)}

    def __contains__(self, coord: Coord) -> bool:
        return coord in self._records

    def get(self, coord: Coord) -> SearchRecord:
        return self._records.get(coord, self._UNSEEN)

    def distance(self, cell: Cell) -> float:
        return self.get(cell.coord).distance

    def came_from(self, cell: Cell) -> Optional[Coord]:
        return self.get(cell.coord).came_from

    def record(self, cell: Cell, distance: float, came_from: Cell) -> None:
        self._records[cell.coord] = SearchRecord(distance, came_from.coord)

    def chain(self, grid: Grid, cell: Cell) -> Tuple[Cell, ...]:
        """Walk came-from links from `cell` back to the origin, returned origin-first."""
        path: List[Cell] = []
        cur: Optional[Coord] = cell.coord
        while cur is not None:
            path.append(grid.at(cur))
            cur = self.get(cur).came_from
        path.reverse()
        return tuple(path)


def manhattan(a: Cell, b: Cell) -> float:
    return abs(a.row - b.row) + abs(a.col - b.col)


def octile(a: Cell, b: Cell) -> float:
    """Exact 8-connected distance on an empty grid (diagonal move = √2)."""
    dr = abs(a.row - b.row)
    dc = abs(a.col - b.col)
    return max(dr, dc) + (math.sqrt(2) - 1) * min(dr, dc)

"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Relaxes every directed edge of the grid's adjacency (each orthogonal
pair of free cells, both ways) up to |V| - 1 rounds, stopping early once
a round changes nothing.  A final detector pass flags negative cycles.

Unlike the frontier searches this one has no meaningful visitation
order, so it yields exactly ONE PathStep: every cell of the
reconstructed path as `visited`, plus the path itself.  An unreachable
goal yields nothing.

`cost` defaults to the uniform grid cost of 1, under which a negative
cycle cannot exist.  Passing a cost function with negative values makes
the detector reachable; a detected cycle aborts the run with an empty
trace (there is no well-defined shortest path to show).
"""

import logging
import math
from typing import Callable, Iterator, List, Tuple

from algorithms.pathfinding.search import SearchRecords, edge_cost, neighbours
from algorithms.step import PathStep
from grid import Cell, Grid

logger = logging.getLogger(__name__)


def bellman_ford(grid: Grid, cost: Callable[[Cell, Cell], float] = edge_cost) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    free = [c for c in grid if not c.is_wall]
    edges: List[Tuple[Cell, Cell, float]] = [
        (u, v, cost(u, v)) for u in free for v in neighbours(grid, u)
    ]

    records = SearchRecords(start)
    for round_no in range(1, len(free)):
        changed = False
        for u, v, w in edges:
            du = records.distance(u)
            if du + w < records.distance(v):
                records.record(v, du + w, came_from=u)
                changed = True
        if not changed:
            logger.debug("bellman-ford converged after %d round(s)", round_no)
            break

    # negative-cycle check
    for u, v, w in edges:
        if records.distance(u) + w < records.distance(v):
            logger.warning("bellman-ford: negative cycle through %s -> %s, no path reported", u.coord, v.coord)
            return

    if math.isinf(records.distance(end)):
        return

    path = records.chain(grid, end)
    yield PathStep(visited=path, path=path)

"""
astar.py — A* Search
=====================
Open set ordered by f = g + h, with h = Manhattan distance to the goal
(admissible and consistent on a 4-connected unit-cost grid).

The open/closed skeleton lives in `best_first` so Greedy Best-First can
reuse it with a different priority:

    • pop the lowest-priority entry; skip it if already closed
    • close it; if it is the goal, emit the path and stop
    • for each open neighbour: if g improves (or the neighbour was never
      reached) record the new g + came-from and push it again
    • emit one PathStep for the expanded cell

The start cell is expanded first but emits no PathStep; as in BFS, the
search origin is never reported as visited.

Heap entries carry an insertion counter after the priority, so equal
priorities pop in insertion order (stable-sort tie-breaking).
"""

import heapq
import itertools
from typing import Callable, Iterator, List, Set, Tuple

from algorithms.pathfinding.search import SearchRecords, edge_cost, manhattan, neighbours
from algorithms.step import PathStep
from grid import Coord, Grid


# priority(g, h) → float
Priority = Callable[[float, float], float]


def best_first(grid: Grid, priority: Priority) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    records  = SearchRecords(start)
    counter  = itertools.count()
    open_set: List[Tuple[float, int, Coord]] = [
        (priority(0, manhattan(start, end)), next(counter), start.coord)
    ]
    closed: Set[Coord] = set()

    while open_set:
        _, _, coord = heapq.heappop(open_set)
        if coord in closed:
            continue
        closed.add(coord)
        node = grid.at(coord)

        if node == end:
            yield PathStep(visited=(node,), path=records.chain(grid, end))
            return

        for nbr in neighbours(grid, node):
            if nbr.coord in closed:
                continue
            tentative_g = records.distance(node) + edge_cost(node, nbr)
            if tentative_g < records.distance(nbr):
                records.record(nbr, tentative_g, came_from=node)
                heapq.heappush(
                    open_set,
                    (priority(tentative_g, manhattan(nbr, end)), next(counter), nbr.coord),
                )

        if node != start:
            yield PathStep(visited=(node,))


def astar(grid: Grid) -> Iterator[PathStep]:
    return best_first(grid, lambda g, h: g + h)

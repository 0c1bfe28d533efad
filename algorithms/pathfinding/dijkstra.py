"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Uniform-cost grid version with an explicit unvisited set.

Extraction order: smallest tentative distance first; ties go to the cell
that came first in the unvisited set's original (row-major) order.  The
heap key (distance, row-major index) encodes exactly that, so the heap
behaves like re-sorting the unvisited list stably on every iteration.

Termination:
  • goal extracted            → final PathStep with the path
  • smallest remaining is +∞  → trace ends, no path (heap runs dry:
                                 unreachable cells are never pushed)

Every extraction yields a PathStep except the start cell's: as in BFS,
the search origin is never reported as visited, so the trace opens with
the first cell the search reached.
"""

import heapq
from typing import Iterator, List, Set, Tuple

from algorithms.pathfinding.search import SearchRecords, edge_cost, neighbours
from algorithms.step import PathStep
from grid import Coord, Grid


def dijkstra(grid: Grid) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    def order(coord: Coord) -> int:
        return coord[0] * grid.cols + coord[1]

    records = SearchRecords(start)
    unvisited: Set[Coord] = {c.coord for c in grid}
    pq: List[Tuple[float, int, Coord]] = [(0, order(start.coord), start.coord)]

    while pq:
        d, _, coord = heapq.heappop(pq)

        # stale entry
        if coord not in unvisited or d > records.get(coord).distance:
            continue
        unvisited.discard(coord)
        node = grid.at(coord)

        if node == end:
            yield PathStep(visited=(node,), path=records.chain(grid, end))
            return

        for nbr in neighbours(grid, node):
            if nbr.coord not in unvisited:
                continue
            new_dist = d + edge_cost(node, nbr)
            if new_dist < records.distance(nbr):
                records.record(nbr, new_dist, came_from=node)
                heapq.heappush(pq, (new_dist, order(nbr.coord), nbr.coord))

        if node != start:
            yield PathStep(visited=(node,))

"""
bfs.py — Breadth-First Search
==============================
FIFO frontier.  Neighbours are marked seen when enqueued, so every cell
enters the queue at most once and the first time the goal is dequeued
its came-from chain is a shortest (hop-count) path.

Yields:
  • one PathStep per dequeued cell that is not the goal
  • one final PathStep carrying the path when the goal is dequeued

The start cell is the search origin and is never reported as visited.
"""

from collections import deque
from typing import Iterator, Set

from algorithms.pathfinding.search import SearchRecords, neighbours
from algorithms.step import PathStep
from grid import Coord, Grid


def bfs(grid: Grid) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    records = SearchRecords(start)
    queue   = deque([start])
    seen: Set[Coord] = {start.coord}

    while queue:
        node = queue.popleft()

        if node == end:
            yield PathStep(visited=(node,), path=records.chain(grid, end))
            return

        for nbr in neighbours(grid, node):
            if nbr.coord not in seen:
                seen.add(nbr.coord)
                records.record(nbr, records.distance(node) + 1, came_from=node)
                queue.append(nbr)

        if node != start:
            yield PathStep(visited=(node,))

"""
dfs.py — Depth-First Search
=============================
Explicit LIFO stack (no Python recursion limit issues).  Like BFS,
neighbours are marked seen when pushed and keep the came-from link of
the cell that pushed them, so the path returned is "a" path, not the
shortest one.
"""

from typing import Iterator, List, Set

from algorithms.pathfinding.search import SearchRecords, neighbours
from algorithms.step import PathStep
from grid import Cell, Coord, Grid


def dfs(grid: Grid) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    records = SearchRecords(start)
    stack: List[Cell] = [start]
    seen:  Set[Coord] = {start.coord}

    while stack:
        node = stack.pop()

        if node == end:
            yield PathStep(visited=(node,), path=records.chain(grid, end))
            return

        for nbr in neighbours(grid, node):
            if nbr.coord not in seen:
                seen.add(nbr.coord)
                records.record(nbr, records.distance(node) + 1, came_from=node)
                stack.append(nbr)

        if node != start:
            yield PathStep(visited=(node,))

"""
greedy_bfs.py — Greedy Best-First Search
==========================================
Same open/closed structure as A*, but the open set is ordered by h
alone: zero regard for the cost incurred so far.  Usually expands far
fewer cells than A*, and is NOT guaranteed to return a shortest path.
"""

from typing import Iterator

from algorithms.pathfinding.astar import best_first
from algorithms.step import PathStep
from grid import Grid


def greedy_best_first(grid: Grid) -> Iterator[PathStep]:
    return best_first(grid, lambda g, h: h)

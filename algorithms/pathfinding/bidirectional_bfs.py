"""
bidirectional_bfs.py — Bidirectional BFS
==========================================
Two FIFO frontiers, one grown from the start and one from the end,
advance ALTERNATELY one cell at a time.  Each side marks neighbours as
seen when it enqueues them and keeps its own came-from table.

Meeting rule: when a cell popped from one frontier has already been seen
by the other, that cell is the meeting point.  The path is

    start → … → meeting        (forward came-from chain)
  + meeting → … → end          (backward chain, meeting not repeated)

The two seed cells (start and end) are never reported as visited.  If
either frontier runs dry the two components are disconnected and the
trace ends without a path.
"""

from collections import deque
from typing import Deque, Iterator, Set, Tuple

from algorithms.pathfinding.search import SearchRecords, neighbours
from algorithms.step import PathStep
from grid import Cell, Coord, Grid


class _Frontier:
    def __init__(self, seed: Cell):
        self.seed    = seed
        self.queue:   Deque[Cell] = deque([seed])
        self.seen:    Set[Coord] = {seed.coord}
        self.records = SearchRecords(seed)

    def expand(self, grid: Grid, node: Cell) -> None:
        for nbr in neighbours(grid, node):
            if nbr.coord not in self.seen:
                self.seen.add(nbr.coord)
                self.records.record(nbr, self.records.distance(node) + 1, came_from=node)
                self.queue.append(nbr)


def bidirectional_bfs(grid: Grid) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    forward  = _Frontier(start)
    backward = _Frontier(end)

    while forward.queue and backward.queue:
        for this, other in ((forward, backward), (backward, forward)):
            node = this.queue.popleft()

            if node.coord in other.seen:
                path = _join(grid, forward, backward, node)
                yield PathStep(visited=(node,), path=path)
                return

            this.expand(grid, node)
            if node != this.seed:
                yield PathStep(visited=(node,))

            if not this.queue:
                return


def _join(grid: Grid, forward: _Frontier, backward: _Frontier, meeting: Cell) -> Tuple[Cell, ...]:
    head = forward.records.chain(grid, meeting)                 # start … meeting
    tail = tuple(reversed(backward.records.chain(grid, meeting)))  # meeting … end
    return head + tail[1:]

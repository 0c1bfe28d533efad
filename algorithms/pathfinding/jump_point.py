"""
jump_point.py — Jump-Point Search
==================================
A* over an 8-connected grid where neighbour expansion is replaced by
directional "jumps": from a cell, scan along a ray, skipping every
intermediate free cell, until one of these stops the scan

    • the goal
    • a forced neighbour (an adjacent wall that makes some cell reachable
      optimally only through the current one)
    • for diagonal rays: a horizontal or vertical sub-scan that finds a
      jump point
    • a wall or the grid edge (ray discarded)

Rules are the canonical Harabor & Grastien ones with diagonal moves always
allowed.  With (dr, dc) the travel direction:

  straight, horizontal  forced if  free(r±1, c+dc) and wall(r±1, c)
  straight, vertical    forced if  free(r+dr, c±1) and wall(r, c±1)
  diagonal              forced if  free(r+dr, c-dc) and wall(r, c-dc)
                                or free(r-dr, c+dc) and wall(r-dr, c)

Expanding a jump point only follows the pruned directions (natural
neighbours plus forced ones) implied by the direction it was reached from.

g is the octile distance between successive jump points, h the octile
distance to the goal.  Each expanded jump point yields one PathStep; the
final path is expanded back into every intermediate cell.

The start cell is the first jump point expanded and, as in BFS, is never
reported as visited.
"""

import heapq
import itertools
from typing import Iterator, List, Optional, Set, Tuple

from algorithms.pathfinding.search import OCTILE_DIRS, SearchRecords, octile
from algorithms.step import PathStep
from grid import Cell, Coord, Grid


def jump_point_search(grid: Grid) -> Iterator[PathStep]:
    ends = grid.endpoints()
    if ends is None:
        return
    start, end = ends

    records  = SearchRecords(start)
    counter  = itertools.count()
    open_set: List[Tuple[float, int, Coord]] = [(octile(start, end), next(counter), start.coord)]
    closed: Set[Coord] = set()

    while open_set:
        _, _, coord = heapq.heappop(open_set)
        if coord in closed:
            continue
        closed.add(coord)
        node = grid.at(coord)

        if node == end:
            yield PathStep(visited=(node,), path=_expand(grid, records.chain(grid, end)))
            return

        parent = records.came_from(node)
        for dr, dc in _pruned_directions(grid, coord, parent):
            jp = _jump(grid, coord[0] + dr, coord[1] + dc, dr, dc, end.coord)
            if jp is None or jp in closed:
                continue
            jp_cell = grid.at(jp)
            ng = records.distance(node) + octile(node, jp_cell)
            if ng < records.distance(jp_cell):
                records.record(jp_cell, ng, came_from=node)
                heapq.heappush(open_set, (ng + octile(jp_cell, end), next(counter), jp))

        if node != start:
            yield PathStep(visited=(node,))


# ---------------------------------------------------------------------------
# Pruning & jumping
# ---------------------------------------------------------------------------
def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _pruned_directions(grid: Grid, coord: Coord, parent: Optional[Coord]) -> List[Coord]:
    r, c = coord
    if parent is None:
        return list(OCTILE_DIRS)

    dr = _sign(r - parent[0])
    dc = _sign(c - parent[1])
    walkable = grid.is_walkable

    if dr and dc:
        dirs = [(dr, 0), (0, dc), (dr, dc)]
        if not walkable(r, c - dc):
            dirs.append((dr, -dc))
        if not walkable(r - dr, c):
            dirs.append((-dr, dc))
    elif dr:
        dirs = [(dr, 0)]
        if not walkable(r, c + 1):
            dirs.append((dr, 1))
        if not walkable(r, c - 1):
            dirs.append((dr, -1))
    else:
        dirs = [(0, dc)]
        if not walkable(r + 1, c):
            dirs.append((1, dc))
        if not walkable(r - 1, c):
            dirs.append((-1, dc))
    return dirs


def _jump(grid: Grid, r: int, c: int, dr: int, dc: int, goal: Coord) -> Optional[Coord]:
    """First jump point on the ray entering (r, c) with direction (dr, dc), or None."""
    walkable = grid.is_walkable
    while True:
        if not walkable(r, c):
            return None
        if (r, c) == goal:
            return (r, c)

        if dr and dc:
            if (walkable(r + dr, c - dc) and not walkable(r, c - dc)) or \
               (walkable(r - dr, c + dc) and not walkable(r - dr, c)):
                return (r, c)
            if _jump(grid, r + dr, c, dr, 0, goal) is not None or \
               _jump(grid, r, c + dc, 0, dc, goal) is not None:
                return (r, c)
        elif dr:
            if (walkable(r + dr, c + 1) and not walkable(r, c + 1)) or \
               (walkable(r + dr, c - 1) and not walkable(r, c - 1)):
                return (r, c)
        else:
            if (walkable(r + 1, c + dc) and not walkable(r + 1, c)) or \
               (walkable(r - 1, c + dc) and not walkable(r - 1, c)):
                return (r, c)

        r, c = r + dr, c + dc


def _expand(grid: Grid, jump_points: Tuple[Cell, ...]) -> Tuple[Cell, ...]:
    """Fill in the straight / diagonal runs between consecutive jump points."""
    if not jump_points:
        return ()
    cells = [jump_points[0]]
    for a, b in zip(jump_points, jump_points[1:]):
        dr, dc = _sign(b.row - a.row), _sign(b.col - a.col)
        r, c = a.row, a.col
        while (r, c) != b.coord:
            r, c = r + dr, c + dc
            cells.append(grid.cell(r, c))
    return tuple(cells)

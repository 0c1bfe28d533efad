"""
grid/
-----
Pathfinding input layer.  Public API:

    from grid import Grid, Cell
    from grid import InvalidGridError
"""

from grid.cell import Cell, Coord
from grid.grid import Grid, InvalidGridError

__all__ = [
    "Cell",  "Coord",
    "Grid",  "InvalidGridError",
]

"""
cell.py — Grid Cell
===================
One square of the pathfinding grid.

Design decisions:
  - A Cell is a frozen value: position plus the three static flags.
    Search state (tentative distance, came-from pointer) does NOT live
    here; every algorithm run keeps its own table keyed by `coord`, so a
    grid can be searched any number of times without a reset pass.
  - Cells hash / compare by value, so they can go straight into sets
    and be used as Step payloads.
"""

from dataclasses import dataclass
from typing import Tuple


Coord = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """
    Attributes:
        row, col : Position in the grid (0-based, row-major).
        is_wall  : Impassable obstacle.
        is_start : The unique search origin.
        is_end   : The unique goal.
    """

    row:      int
    col:      int
    is_wall:  bool = False
    is_start: bool = False
    is_end:   bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def to_dict(self) -> dict:
        return {
            "row":      self.row,
            "col":      self.col,
            "is_wall":  self.is_wall,
            "is_start": self.is_start,
            "is_end":   self.is_end,
        }

    def __repr__(self) -> str:
        flag = "#" if self.is_wall else "S" if self.is_start else "E" if self.is_end else "."
        return f"Cell({self.row},{self.col}{'' if flag == '.' else ' ' + flag})"

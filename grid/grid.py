"""
grid.py — Pathfinding Grid Container
=====================================
Immutable rectangular grid of Cells.  Pathfinding algorithms only ever
read from it.

Responsibilities:
  1. Lookup & bounds checks                 (cell, in_bounds, is_walkable)
  2. Endpoint discovery                     (endpoints)
  3. Import from text / dict                (from_strings, from_dict)
  4. Serialisation                          (to_dict)

Text format (one row per line):
    S . . #
    . # . .
    . . . E
Whitespace between symbols is optional.  `S` start, `E` end, `#` wall,
`.` free.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from grid.cell import Cell, Coord


class InvalidGridError(ValueError):
    """Raised when grid input is not a well-formed rectangle."""


_SYMBOLS = {
    ".": {},
    "#": {"is_wall": True},
    "S": {"is_start": True},
    "E": {"is_end": True},
}


class Grid:
    """
    Attributes:
        rows, cols : Dimensions.
        cells      : Tuple of row tuples, cells[r][c].
    """

    def __init__(self, cells: Sequence[Sequence[Cell]]):
        rows = tuple(tuple(r) for r in cells)
        width = len(rows[0]) if rows else 0
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(f"row {r} has {len(row)} cells, expected {width}")
            for c, cell in enumerate(row):
                if cell.coord != (r, c):
                    raise InvalidGridError(f"cell {cell!r} stored at position ({r},{c})")

        self.cells: Tuple[Tuple[Cell, ...], ...] = rows
        self.rows:  int = len(rows)
        self.cols:  int = width

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def at(self, coord: Coord) -> Cell:
        return self.cells[coord[0]][coord[1]]

    def is_walkable(self, row: int, col: int) -> bool:
        """False for walls and anything outside the grid."""
        return self.in_bounds(row, col) and not self.cells[row][col].is_wall

    def endpoints(self) -> Optional[Tuple[Cell, Cell]]:
        """(start, end) when the grid has exactly one of each, else None."""
        starts = [c for c in self if c.is_start]
        ends   = [c for c in self if c.is_end]
        if len(starts) != 1 or len(ends) != 1:
            return None
        return starts[0], ends[0]

    def walls(self) -> List[Cell]:
        return [c for c in self if c.is_wall]

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __len__(self) -> int:
        return self.size

    # ==================================================================
    # CONSTRUCTORS
    # ==================================================================
    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        return cls([[Cell(r, c) for c in range(cols)] for r in range(rows)])

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Grid":
        if isinstance(lines, str):
            lines = lines.splitlines()
        for i, line in enumerate(lines):
            if not isinstance(line, str):
                raise InvalidGridError(f"grid row {i} is not a string: {line!r}")

        cells: List[List[Cell]] = []
        for r, line in enumerate(l for l in lines if l.strip()):
            row = []
            for c, symbol in enumerate(line.replace(" ", "").strip()):
                if symbol not in _SYMBOLS:
                    raise InvalidGridError(f"unknown grid symbol {symbol!r} at ({r},{c})")
                row.append(Cell(r, c, **_SYMBOLS[symbol]))
            cells.append(row)
        return cls(cells)

    @classmethod
    def from_dict(cls, data: Dict) -> "Grid":
        """
        Build from {"rows", "cols", "walls": [[r, c], …], "start": [r, c], "end": [r, c]}.
        `start` / `end` may be omitted (such a grid simply yields empty traces).
        """
        try:
            rows = int(data["rows"])
            cols = int(data["cols"])
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidGridError(f"grid needs integer 'rows' and 'cols': {e}") from e
        if rows < 0 or cols < 0:
            raise InvalidGridError("grid dimensions must be non-negative")

        raw_walls = data.get("walls", [])
        if not isinstance(raw_walls, (list, tuple)):
            raise InvalidGridError(f"'walls' must be a list of [row, col] pairs, got {raw_walls!r}")

        walls = {_coord(w, rows, cols) for w in raw_walls}
        start = _coord(data["start"], rows, cols) if data.get("start") is not None else None
        end   = _coord(data["end"], rows, cols) if data.get("end") is not None else None

        return cls([
            [
                Cell(
                    r, c,
                    is_wall=(r, c) in walls,
                    is_start=(r, c) == start,
                    is_end=(r, c) == end,
                )
                for c in range(cols)
            ]
            for r in range(rows)
        ])

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        ends = self.endpoints()
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "walls": [list(c.coord) for c in self.walls()],
            "start": list(ends[0].coord) if ends else None,
            "end":   list(ends[1].coord) if ends else None,
        }

    def to_strings(self) -> List[str]:
        return [
            "".join("#" if c.is_wall else "S" if c.is_start else "E" if c.is_end else "." for c in row)
            for row in self.cells
        ]

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={len(self.walls())})"


def _coord(raw, rows: int, cols: int) -> Coord:
    try:
        r, c = int(raw[0]), int(raw[1])
    except (TypeError, ValueError, IndexError, KeyError, OverflowError) as e:
        raise InvalidGridError(f"bad coordinate {raw!r}") from e
    if not (0 <= r < rows and 0 <= c < cols):
        raise InvalidGridError(f"coordinate {raw!r} outside {rows}x{cols} grid")
    return (r, c)

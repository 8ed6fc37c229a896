"""
Grid representation for the tilting platform.

The platform is a rectangular 2D array of cells:

    O....#....
    O.OO#....#
    .....##...

where each cell is one of Σ = {'.', 'O', '#'}.

Key concepts:
- Cell: Empty space, rolling rock or fixed rock
- Grid: Immutable snapshot of the whole platform
- Load: Weighted count of rolling rocks, heavier toward the north edge
"""

from __future__ import annotations
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple
import numpy as np


class FormatError(ValueError):
    """Raised when text cannot be parsed into a Grid."""


class Cell(IntEnum):
    """
    Cell variants encoded as integers for compact numpy storage.
    """
    EMPTY = 0    # "."
    ROLLING = 1  # "O"
    FIXED = 2    # "#"

    def __str__(self) -> str:
        return _CELL_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> "Cell":
        """Convert character to Cell."""
        try:
            return _CHAR_CELLS[char]
        except KeyError:
            raise FormatError(f"Unknown cell character: {char!r}") from None


_CELL_CHARS = {
    Cell.EMPTY: ".",
    Cell.ROLLING: "O",
    Cell.FIXED: "#",
}
_CHAR_CELLS = {char: cell for cell, char in _CELL_CHARS.items()}


class Grid:
    """
    Immutable snapshot of the platform.

    Cells are stored in a read-only ``int8`` array of shape (rows, columns).
    Two grids are equal iff every cell matches positionally, and grids are
    hashable so they can be used as dict keys during cycle detection.

    Example:
        grid = Grid.from_lines(["O.#", ".O."])
        print(grid.total_load())  # 3
        print(grid.rotate(1).to_string())
    """

    def __init__(self, cells: np.ndarray | Iterable[Iterable[int]]):
        # Always copies, so a Grid never aliases caller data
        cells = np.array(cells, dtype=np.int8)
        if cells.ndim != 2 or cells.shape[0] == 0 or cells.shape[1] == 0:
            raise FormatError(
                f"Grid needs at least one row and one column, got shape {cells.shape}"
            )
        if not np.isin(cells, [int(c) for c in Cell]).all():
            unknown = sorted(set(np.unique(cells).tolist()) - {int(c) for c in Cell})
            raise FormatError(f"Unknown cell values: {unknown}")
        # Make immutable
        cells.flags.writeable = False
        self._cells = cells

    # ===== Construction =====

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """
        Parse grid from text lines.

        Raises:
            FormatError: on unknown characters, empty input or ragged rows
        """
        rows: List[List[int]] = []
        width = None
        for row_index, line in enumerate(lines):
            line = line.rstrip("\r\n")
            if width is None:
                width = len(line)
            elif len(line) != width:
                raise FormatError(
                    f"Row {row_index} has length {len(line)}, expected {width}"
                )
            row = []
            for col_index, char in enumerate(line):
                if char not in _CHAR_CELLS:
                    raise FormatError(
                        f"Invalid character {char!r} at row {row_index}, column {col_index}"
                    )
                row.append(int(_CHAR_CELLS[char]))
            rows.append(row)

        if not rows or width == 0:
            raise FormatError("Grid input is empty")

        return cls(np.array(rows, dtype=np.int8))

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Parse grid from a multi-line string."""
        return cls.from_lines(text.splitlines())

    # ===== Properties =====

    @property
    def cells(self) -> np.ndarray:
        """Read-only cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Return (rows, columns)."""
        rows, columns = self._cells.shape
        return rows, columns

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def columns(self) -> int:
        return self._cells.shape[1]

    def __getitem__(self, index: Tuple[int, int]) -> Cell:
        return Cell(int(self._cells[index]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    # ===== Analysis =====

    def counts(self) -> Dict[Cell, int]:
        """Number of cells of each variant."""
        return {cell: int(np.count_nonzero(self._cells == cell)) for cell in Cell}

    def total_load(self) -> int:
        """
        Total load on the north support beams.

        Each rolling rock contributes (rows - row_index), so rocks in the
        top row weigh ``rows`` and rocks in the bottom row weigh 1.
        """
        rocks_per_row = np.count_nonzero(self._cells == Cell.ROLLING, axis=1)
        weights = np.arange(self.rows, 0, -1)
        return int(np.dot(rocks_per_row, weights))

    # ===== Transformations =====

    def rotate(self, times: int = 1) -> "Grid":
        """
        Rotate clockwise by ``times`` quarter turns.

        ``rotate(0)`` returns an equal Grid backed by a fresh array.
        """
        return Grid(np.rot90(self._cells, k=-(times % 4)))

    def copy(self) -> "Grid":
        return Grid(self._cells)

    # ===== String representations =====

    def to_lines(self) -> List[str]:
        return ["".join(_CELL_CHARS[Cell(int(c))] for c in row) for row in self._cells]

    def to_string(self) -> str:
        """Grid rendered in its input notation, one row per line."""
        return "\n".join(self.to_lines())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"


# ===== Utility functions =====

def total_load(grid: Grid) -> int:
    """Total load of a grid (see Grid.total_load)."""
    return grid.total_load()


def rotate(grid: Grid, times: int) -> Grid:
    """Rotate grid clockwise by ``times`` quarter turns."""
    return grid.rotate(times)

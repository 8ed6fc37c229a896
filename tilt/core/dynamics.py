"""
Tilt dynamics for the platform.

Tilting moves every rolling rock as far as it can toward one edge:

    ..#..O..  --WEST-->  ..#O....

Every direction is reduced to the WEST case: rotate the grid so the target
edge becomes column 0, compact each row independently, rotate back.
"""

from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple
import numpy as np

from .grid import Cell, Grid


_EMPTY = int(Cell.EMPTY)
_ROLLING = int(Cell.ROLLING)
_FIXED = int(Cell.FIXED)


class Direction(Enum):
    """Tilt direction, valued by its clockwise quarter turns to the west edge."""
    WEST = 0
    SOUTH = 1
    EAST = 2
    NORTH = 3

    @property
    def quarter_turns(self) -> int:
        """Clockwise quarter turns that bring this edge to column 0."""
        return self.value

    @property
    def inverse_turns(self) -> int:
        """Quarter turns that undo ``quarter_turns``."""
        return (4 - self.value) % 4


# One spin cycle
SPIN_ORDER: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.WEST,
    Direction.SOUTH,
    Direction.EAST,
)


def compact_row(row: Sequence[int] | np.ndarray) -> np.ndarray:
    """
    Roll every rock in a row toward index 0.

    Between fixed rocks (and the row ends) the rolling rocks are packed
    first, followed by the empty cells. Fixed rocks keep their positions.

    Args:
        row: Cell values of a single row

    Returns:
        New int8 array of the same length
    """
    values = row.tolist() if isinstance(row, np.ndarray) else [int(c) for c in row]
    out = np.empty(len(values), dtype=np.int8)

    pos = 0
    rocks = 0
    empties = 0
    for value in values:
        if value == _ROLLING:
            rocks += 1
        elif value == _EMPTY:
            empties += 1
        else:
            out[pos:pos + rocks] = _ROLLING
            pos += rocks
            out[pos:pos + empties] = _EMPTY
            pos += empties
            out[pos] = _FIXED
            pos += 1
            rocks = 0
            empties = 0

    out[pos:pos + rocks] = _ROLLING
    pos += rocks
    out[pos:pos + empties] = _EMPTY

    return out


def tilt(grid: Grid, direction: Direction) -> Grid:
    """
    Tilt the platform so every rolling rock moves toward ``direction``.

    Rocks stop at the boundary, at a fixed rock or at a rock already at
    rest; they never pass each other. The input grid is not modified.
    """
    rotated = grid.rotate(direction.quarter_turns).cells
    compacted = np.array([compact_row(row) for row in rotated], dtype=np.int8)
    return Grid(compacted).rotate(direction.inverse_turns)


def spin(grid: Grid) -> Grid:
    """Apply one spin cycle: tilt NORTH, WEST, SOUTH, then EAST."""
    for direction in SPIN_ORDER:
        grid = tilt(grid, direction)
    return grid

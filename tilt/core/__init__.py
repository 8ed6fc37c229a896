"""
Core module for the tilting platform simulator.

Contains:
- Grid: Immutable platform snapshot, parser and load calculation
- Direction / tilt / spin: Gravity shifts toward one edge
- cycle: Loop-accelerated repetition of spin cycles
"""

from .grid import Cell, Grid, FormatError, total_load, rotate
from .dynamics import Direction, SPIN_ORDER, compact_row, tilt, spin
from .cycle import (
    CycleStats, CycleResult, SpinHistory,
    run_cycles, cycle, cycle_brute_force,
)

__all__ = [
    "Cell",
    "Grid",
    "FormatError",
    "total_load",
    "rotate",
    "Direction",
    "SPIN_ORDER",
    "compact_row",
    "tilt",
    "spin",
    # Cycle engine
    "CycleStats",
    "CycleResult",
    "SpinHistory",
    "run_cycles",
    "cycle",
    "cycle_brute_force",
]

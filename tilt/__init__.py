"""
Tilting Platform Simulator

Simulates rolling rocks on a platform that is tilted North, West, South
and East in repeated spin cycles, and reports the load on the north
support beams.

Main components:
- core: Grid, tilt dynamics, loop-accelerated spin cycles
- storage: Reading grids from text files
"""

__version__ = "0.1.0"
__author__ = "Tilt Platform Team"

from .core import Cell, Grid, FormatError, Direction, tilt, spin, cycle, total_load
from .storage import load_grid
from .config import SimulationConfig

__all__ = [
    "Cell",
    "Grid",
    "FormatError",
    "Direction",
    "tilt",
    "spin",
    "cycle",
    "total_load",
    "load_grid",
    "SimulationConfig",
]

"""
Storage module for the tilting platform simulator.

Provides loading of platform grids from text files.
"""

from .text_storage import load_grid, read_grid_lines

__all__ = [
    "load_grid",
    "read_grid_lines",
]

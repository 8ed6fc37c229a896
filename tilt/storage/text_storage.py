"""
Plain-text storage for platform grids.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Union

from tilt.core.grid import FormatError, Grid


def read_grid_lines(path: Union[str, Path]) -> List[str]:
    """
    Read the lines of a grid file.

    Raises:
        OSError: if the file cannot be opened or read
        UnicodeDecodeError: if the file is not valid UTF-8
    """
    with open(path, 'r', encoding='utf-8') as f:
        return f.read().splitlines()


def load_grid(path: Union[str, Path]) -> Grid:
    """
    Load a grid from a text file.

    Args:
        path: File with one row of '.', '#' and 'O' per line

    Returns:
        Parsed Grid

    Raises:
        OSError: if the file cannot be opened or read
        FormatError: if the content is not valid UTF-8 or not a valid grid
    """
    try:
        lines = read_grid_lines(path)
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not valid UTF-8 text: {e}") from e
    return Grid.from_lines(lines)

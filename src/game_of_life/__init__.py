"""
Conway's Game of Life.

A two-state cellular automaton on a toroidal grid, advanced one
generation at a time through a stateful Universe.
"""

from .cell import Cell, CELL_DTYPE
from .config import UniverseConfig
from .exceptions import (
    InvalidDimensionError,
    OutOfBoundsError,
    UniverseError,
    UniverseReleasedError,
)
from .patterns import PATTERNS
from .universe import Universe

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CELL_DTYPE",
    "Universe",
    "UniverseConfig",
    "PATTERNS",
    "UniverseError",
    "OutOfBoundsError",
    "InvalidDimensionError",
    "UniverseReleasedError",
]

"""Initial cell patterns used when a universe is created."""

from __future__ import annotations

import random
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from .cell import CELL_DTYPE, Cell


def dead(width: int, height: int, rng: random.Random, density: float) -> NDArray[np.uint8]:
    """All cells dead."""
    return np.full(width * height, Cell.Dead.value, dtype=CELL_DTYPE)


def random_fill(width: int, height: int, rng: random.Random, density: float) -> NDArray[np.uint8]:
    """Each cell is alive with probability ``density``, drawn from ``rng``."""
    return np.fromiter(
        (
            Cell.Alive.value if rng.random() < density else Cell.Dead.value
            for _ in range(width * height)
        ),
        dtype=CELL_DTYPE,
        count=width * height,
    )


def tutorial(width: int, height: int, rng: random.Random, density: float) -> NDArray[np.uint8]:
    """Alive wherever the flat index is divisible by 2 or by 7."""
    i = np.arange(width * height)
    alive = (i % 2 == 0) | (i % 7 == 0)
    return np.where(alive, Cell.Alive.value, Cell.Dead.value).astype(CELL_DTYPE)


def spaceship(width: int, height: int, rng: random.Random, density: float) -> NDArray[np.uint8]:
    """
    A single six-cell ship just above and left of the centre.

    Layout, relative to its top-left corner::

        X . X
        X X X
        . X .

    Offsets wrap around the grid edges, so small grids still get the ship.
    """
    cells = dead(width, height, rng, density)
    top, left = height // 2 - 1, width // 2 - 1
    for d_row, d_col in ((0, 0), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1)):
        row = (top + d_row) % height
        col = (left + d_col) % width
        cells[row * width + col] = Cell.Alive.value
    return cells


PatternFactory = Callable[[int, int, random.Random, float], NDArray[np.uint8]]

PATTERNS: dict[str, PatternFactory] = {
    "random": random_fill,
    "tutorial": tutorial,
    "spaceship": spaceship,
    "dead": dead,
}


def build_pattern(
    name: str,
    width: int,
    height: int,
    rng: random.Random,
    density: float = 0.5,
) -> NDArray[np.uint8]:
    """
    Build the flat, row-major cell buffer for a named pattern.

    Args:
        name: One of the keys of ``PATTERNS``
        width: Number of columns
        height: Number of rows
        rng: Random source, only consumed by the "random" pattern
        density: Probability of a live cell for the "random" pattern

    Returns:
        A fresh uint8 array of length ``width * height``
    """
    try:
        factory = PATTERNS[name]
    except KeyError:
        raise ValueError(
            f"unknown pattern {name!r}, expected one of {sorted(PATTERNS)}"
        ) from None
    return factory(width, height, rng, density)

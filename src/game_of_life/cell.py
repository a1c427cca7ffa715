"""Cell states of the Game of Life grid."""

from enum import Enum

import numpy as np


# One byte per cell in the raw buffer
CELL_DTYPE = np.uint8


class Cell(Enum):
    """Possible states of a cell.

    The values are the encoding used in the raw cell buffer and must not change.
    """
    Dead = 0
    Alive = 1

    def toggled(self) -> "Cell":
        """Return the opposite state."""
        return Cell.Dead if self is Cell.Alive else Cell.Alive

    @property
    def symbol(self) -> str:
        return "◼" if self is Cell.Alive else "◻"

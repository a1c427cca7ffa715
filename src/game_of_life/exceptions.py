"""Exceptions raised on contract violations of the universe API."""


class UniverseError(Exception):
    """Base class for all universe errors."""


class OutOfBoundsError(UniverseError, IndexError):
    """Raised when a (row, column) pair lies outside the grid."""

    def __init__(self, row: int, column: int, height: int, width: int):
        self.row = row
        self.column = column
        super().__init__(
            f"cell ({row}, {column}) is outside the {height}x{width} grid"
        )


class InvalidDimensionError(UniverseError, ValueError):
    """Raised when a width or height is not a positive integer."""


class UniverseReleasedError(UniverseError, RuntimeError):
    """Raised when a universe is used after free()."""

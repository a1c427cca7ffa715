"""Game of Life universe: a toroidal grid of cells advanced one generation per tick."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np
from mesa import Model
from numpy.typing import NDArray

from .cell import CELL_DTYPE, Cell
from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, UniverseConfig, validate_dimension
from .exceptions import OutOfBoundsError, UniverseReleasedError
from .patterns import build_pattern

logger = logging.getLogger(__name__)


def neighbor_offsets(width: int, height: int) -> tuple[tuple[int, int], ...]:
    """
    Distinct (d_row, d_col) offsets of the Moore neighbours on a width x height torus.

    Offsets are reduced modulo the dimensions, so on grids narrower than three
    cells a neighbour reached from both sides is only listed once and the cell
    itself is never listed.
    """
    row_deltas = sorted({d % height for d in (-1, 0, 1)})
    col_deltas = sorted({d % width for d in (-1, 0, 1)})
    return tuple(
        (d_row, d_col)
        for d_row in row_deltas
        for d_col in col_deltas
        if (d_row, d_col) != (0, 0)
    )


class Universe(Model):
    """
    Rectangular grid of cells whose edges wrap around.

    Cells are kept in one flat, row-major uint8 buffer
    (``index = row * width + column``) holding ``Cell`` values.
    The universe owns the buffer until ``free()`` is called.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        pattern: str = "random",
        seed: Optional[int] = None,
        density: float = 0.5,
    ):
        """
        Initialize the universe.

        Args:
            width: Number of columns
            height: Number of rows
            pattern: Initial pattern name, see ``patterns.PATTERNS``
            seed: Random seed for the "random" pattern
            density: Probability of a live cell for the "random" pattern
        """
        config = UniverseConfig(width=width, height=height, pattern=pattern, density=density, seed=seed)
        super().__init__(seed=seed)
        self._width = config.width
        self._height = config.height
        self._cells: Optional[NDArray[np.uint8]] = build_pattern(
            config.pattern, self._width, self._height, self.random, config.density
        )
        self._generation_start = self.steps
        logger.info(
            f"Created {self._width}x{self._height} universe with pattern {config.pattern!r} "
            f"({self.population()} alive)"
        )

    @classmethod
    def new(cls, seed: Optional[int] = None) -> "Universe":
        """Create a 64x64 universe with roughly half the cells alive."""
        return cls(seed=seed)

    @classmethod
    def from_config(cls, config: UniverseConfig) -> "Universe":
        return cls(
            width=config.width,
            height=config.height,
            pattern=config.pattern,
            seed=config.seed,
            density=config.density,
        )

    # -- lifecycle ---------------------------------------------------------

    @property
    def generation(self) -> int:
        """Ticks applied since construction or the last resize."""
        return self.steps - self._generation_start

    @property
    def released(self) -> bool:
        return self._cells is None

    def free(self) -> None:
        """
        Release the cell buffer.

        Must be called exactly once; any later call on this universe,
        including a second ``free()``, raises UniverseReleasedError.
        """
        self._ensure_live()
        self._cells = None
        self.running = False
        logger.info(f"Released {self._width}x{self._height} universe")

    def __enter__(self) -> "Universe":
        self._ensure_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.released:
            self.free()

    def _ensure_live(self) -> NDArray[np.uint8]:
        if self._cells is None:
            logger.error("Operation on a released universe")
            raise UniverseReleasedError("universe has already been freed")
        return self._cells

    # -- accessors ---------------------------------------------------------

    def width(self) -> int:
        self._ensure_live()
        return self._width

    def height(self) -> int:
        self._ensure_live()
        return self._height

    def cells(self) -> NDArray[np.uint8]:
        """
        Read-only view of the raw cell buffer, without copying.

        The view is only valid until the next tick, toggle or resize;
        a tick or resize swaps in a new buffer, so a held view goes stale.
        Use ``get_cells()`` for a copy that can be kept.
        """
        view = self._ensure_live().view()
        view.flags.writeable = False
        return view

    def get_cells(self) -> list[Cell]:
        """Owned copy of the grid as a flat, row-major list of Cell."""
        return [Cell(int(v)) for v in self._ensure_live()]

    def get_index(self, row: int, column: int) -> int:
        self._check_bounds(row, column)
        return row * self._width + column

    def cell_at(self, row: int, column: int) -> Cell:
        return Cell(int(self._ensure_live()[self.get_index(row, column)]))

    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self._ensure_live() == Cell.Alive.value))

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count live cells among the eight neighbours of (row, column), wrapping at the edges."""
        cells = self._ensure_live()
        self._check_bounds(row, column)
        count = 0
        for d_row, d_col in neighbor_offsets(self._width, self._height):
            neighbor_row = (row + d_row) % self._height
            neighbor_col = (column + d_col) % self._width
            count += int(cells[neighbor_row * self._width + neighbor_col])
        return count

    # -- mutation ----------------------------------------------------------

    def step(self) -> None:
        """
        Compute the next generation from the current one.

        Every neighbour count is taken from the current buffer and the
        result is written to a new one, so the whole grid updates at once:
            - a live cell with 2 or 3 live neighbours survives
            - a dead cell with exactly 3 live neighbours is born
            - every other cell is dead in the next generation
        """
        grid = self._ensure_live().reshape(self._height, self._width)
        neighbors = np.zeros(grid.shape, dtype=np.uint8)
        for d_row, d_col in neighbor_offsets(self._width, self._height):
            # np.roll wraps, which gives the toroidal neighbourhood
            neighbors += np.roll(grid, shift=(-d_row, -d_col), axis=(0, 1))

        alive = grid == Cell.Alive.value
        born_or_survives = (neighbors == 3) | (alive & (neighbors == 2))
        self._cells = np.where(born_or_survives, Cell.Alive.value, Cell.Dead.value).astype(CELL_DTYPE).ravel()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Generation {self.generation}: {self.population()} alive")

    def tick(self) -> None:
        """Advance the universe by exactly one generation."""
        self.step()

    def toggle_cell(self, row: int, column: int) -> None:
        """Flip the cell at (row, column) between Dead and Alive."""
        cells = self._ensure_live()
        idx = self.get_index(row, column)
        cells[idx] = Cell(int(cells[idx])).toggled().value

    def set_cells(self, positions: Iterable[tuple[int, int]]) -> None:
        """Make every (row, column) in ``positions`` alive."""
        cells = self._ensure_live()
        indices = [self.get_index(row, column) for row, column in positions]
        cells[indices] = Cell.Alive.value

    def set_width(self, width: int) -> None:
        """Set the width and reset every cell to Dead."""
        self._resize(validate_dimension("width", width), self._height)

    def set_height(self, height: int) -> None:
        """Set the height and reset every cell to Dead."""
        self._resize(self._width, validate_dimension("height", height))

    def _resize(self, width: int, height: int) -> None:
        self._ensure_live()
        self._width = width
        self._height = height
        self._cells = np.full(width * height, Cell.Dead.value, dtype=CELL_DTYPE)
        self._generation_start = self.steps
        logger.info(f"Resized universe to {width}x{height}, all cells reset to dead")

    def _check_bounds(self, row: int, column: int) -> None:
        for value in (row, column):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                logger.error(f"Cell coordinates must be integers, got ({row!r}, {column!r})")
                raise OutOfBoundsError(row, column, self._height, self._width)
        if not (0 <= row < self._height and 0 <= column < self._width):
            logger.error(f"Cell ({row}, {column}) outside {self._height}x{self._width} grid")
            raise OutOfBoundsError(row, column, self._height, self._width)

    # -- text form ---------------------------------------------------------

    def render(self) -> str:
        """Text grid, one line per row, ◼ for alive and ◻ for dead cells."""
        grid = self._ensure_live().reshape(self._height, self._width)
        return "".join(
            "".join(Cell(int(v)).symbol for v in row) + "\n"
            for row in grid
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.released:
            return f"Universe(width={self._width}, height={self._height}, released)"
        return f"Universe(width={self._width}, height={self._height}, generation={self.generation})"

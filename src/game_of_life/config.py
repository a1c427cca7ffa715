"""Configuration dataclass for building a universe."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

import numpy as np

from .exceptions import InvalidDimensionError
from .patterns import PATTERNS


DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64


def validate_dimension(name: str, value: Any) -> int:
    """Return ``value`` as an int if it is a positive integer, else raise InvalidDimensionError."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensionError(f"{name} must be > 0, got {value}")
    return int(value)


@dataclass
class UniverseConfig:
    """
    Parameters for constructing a Universe.

    Attributes:
        width: Number of columns
        height: Number of rows
        pattern: Name of the initial pattern (see ``patterns.PATTERNS``)
        density: Probability of a live cell for the "random" pattern
        seed: Seed for the random pattern, None for a non-reproducible one
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    pattern: str = "random"
    density: float = 0.5
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        validate_dimension("width", self.width)
        validate_dimension("height", self.height)
        if self.pattern not in PATTERNS:
            raise ValueError(f"pattern must be one of {sorted(PATTERNS)}, got {self.pattern!r}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be in [0, 1], got {self.density}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "UniverseConfig":
        """Create a config from a dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in d.items() if k in known_fields})

"""Unit tests for initial patterns."""

import random

import numpy as np
import pytest

from game_of_life.patterns import PATTERNS, build_pattern


class TestBuildPattern:
    """Test cases for build_pattern."""

    @pytest.mark.parametrize("name", sorted(PATTERNS))
    def test_length_and_values(self, name):
        cells = build_pattern(name, 7, 5, random.Random(1))
        assert cells.shape == (35,)
        assert cells.dtype == np.uint8
        assert set(np.unique(cells)) <= {0, 1}

    def test_unknown_pattern(self):
        with pytest.raises(ValueError, match="unknown pattern"):
            build_pattern("pulsar", 4, 4, random.Random(1))

    def test_dead(self):
        assert not build_pattern("dead", 4, 4, random.Random(1)).any()

    def test_tutorial(self):
        cells = build_pattern("tutorial", 8, 8, random.Random(1))
        expected = [1 if i % 2 == 0 or i % 7 == 0 else 0 for i in range(64)]
        assert cells.tolist() == expected

    def test_random_is_reproducible(self):
        a = build_pattern("random", 16, 16, random.Random(42))
        b = build_pattern("random", 16, 16, random.Random(42))
        assert np.array_equal(a, b)

    def test_random_density_extremes(self):
        assert build_pattern("random", 6, 6, random.Random(0), density=1.0).all()
        assert not build_pattern("random", 6, 6, random.Random(0), density=0.0).any()

    def test_spaceship(self):
        cells = build_pattern("spaceship", 8, 8, random.Random(1)).reshape(8, 8)
        alive = {tuple(int(v) for v in p) for p in np.argwhere(cells == 1)}
        assert alive == {(3, 3), (3, 5), (4, 3), (4, 4), (4, 5), (5, 4)}

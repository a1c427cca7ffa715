"""Unit tests for UniverseConfig."""

import pytest

from game_of_life.config import UniverseConfig, validate_dimension
from game_of_life.exceptions import InvalidDimensionError


class TestUniverseConfig:
    """Test cases for UniverseConfig."""

    def test_defaults(self):
        config = UniverseConfig()
        assert config.width == 64
        assert config.height == 64
        assert config.pattern == "random"
        assert config.density == 0.5
        assert config.seed is None

    @pytest.mark.parametrize("field", ["width", "height"])
    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive_dimension(self, field, value):
        with pytest.raises(InvalidDimensionError, match=field):
            UniverseConfig(**{field: value})

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            UniverseConfig(width=0)

    def test_rejects_unknown_pattern(self):
        with pytest.raises(ValueError, match="pattern"):
            UniverseConfig(pattern="gosper")

    def test_rejects_density_out_of_range(self):
        with pytest.raises(ValueError, match="density"):
            UniverseConfig(density=1.5)

    def test_dict_roundtrip(self):
        config = UniverseConfig(width=10, height=8, pattern="tutorial", seed=3)
        restored = UniverseConfig.from_dict(config.to_dict())
        assert restored == config

    def test_from_dict_ignores_unknown_keys(self):
        config = UniverseConfig.from_dict({"width": 12, "colour": "red"})
        assert config.width == 12


class TestValidateDimension:
    """Test cases for validate_dimension."""

    def test_accepts_positive_int(self):
        assert validate_dimension("width", 7) == 7

    @pytest.mark.parametrize("value", [2.5, "4", True, None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidDimensionError):
            validate_dimension("width", value)

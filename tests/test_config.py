"""Tests for configuration."""

import pytest
from woodblock.config import Settings, clamp_grid_size, clamp_zoom


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self):
        """Test the documented defaults."""
        config = Settings(_env_file=None)
        assert config.default_pattern_id == 1
        assert config.min_grid_size == 5
        assert config.max_grid_size == 30
        assert config.min_zoom == 0.5
        assert config.max_zoom == 3.0

    def test_environment_override(self, monkeypatch):
        """Test reading values from prefixed environment variables."""
        monkeypatch.setenv("WOODBLOCK_MAX_GRID_SIZE", "40")
        monkeypatch.setenv("WOODBLOCK_LOG_FORMAT", "plain")
        config = Settings(_env_file=None)
        assert config.max_grid_size == 40
        assert config.log_format == "plain"


class TestClamps:
    """Test caller-side clamping helpers."""

    @pytest.mark.parametrize("size,expected", [(1, 5), (5, 5), (12, 12), (30, 30), (100, 30)])
    def test_clamp_grid_size(self, size, expected):
        """Test grid size clamping against the defaults."""
        assert clamp_grid_size(size, Settings(_env_file=None)) == expected

    def test_clamp_grid_size_custom_bounds(self):
        """Test clamping with custom bounds."""
        config = Settings(_env_file=None, min_grid_size=8, max_grid_size=50)
        assert clamp_grid_size(4, config) == 8
        assert clamp_grid_size(45, config) == 45

    @pytest.mark.parametrize("level,expected", [(0.1, 0.5), (1.0, 1.0), (2.4, 2.4), (9.0, 3.0)])
    def test_clamp_zoom(self, level, expected):
        """Test zoom clamping."""
        assert clamp_zoom(level, Settings(_env_file=None)) == pytest.approx(expected)

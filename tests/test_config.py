"""Tests for Config"""

from datetime import date

import pytest

from birthdate_picker.config import Config


class TestConfigDefaults:
    """Test default configuration."""

    def test_defaults(self):
        config = Config()

        assert config.min_years == 18
        assert config.max_years == 130
        assert config.today is None
        assert config.order == "desc"
        assert config.limit is None
        assert config.output == "table"


class TestConfigValidation:
    """Test configuration validation."""

    def test_negative_min_years(self):
        with pytest.raises(ValueError, match="min_years"):
            Config(min_years=-1)

    def test_empty_age_range(self):
        with pytest.raises(ValueError, match="max_years"):
            Config(min_years=30, max_years=30)

    def test_invalid_order(self):
        with pytest.raises(ValueError, match="order"):
            Config(order="random")

    def test_invalid_limit(self):
        with pytest.raises(ValueError, match="limit"):
            Config(limit=0)

    def test_invalid_output(self):
        with pytest.raises(ValueError, match="output"):
            Config(output="xml")


class TestConfigDict:
    """Test dictionary conversion."""

    def test_from_dict_ignores_unknown_keys(self, mock_config):
        config = Config.from_dict({**mock_config, "stale_days": 30})

        assert config.today == date(2026, 10, 19)
        assert not hasattr(config, "stale_days")

    def test_to_dict_round_trip(self, mock_config):
        config = Config.from_dict(mock_config)
        assert config.to_dict() == mock_config

    def test_get(self):
        config = Config(limit=3)

        assert config.get("limit") == 3
        assert config.get("missing", "fallback") == "fallback"

"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from caldate import config
from caldate.errors import ConfigurationError
from caldate.units.timezone import Timezone


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_unset(self) -> None:
        """Test the default when the variable is missing."""
        assert config.Settings.from_env({}).strict_location_comparison is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, raw: str) -> None:
        """Test the accepted truthy spellings."""
        settings = config.Settings.from_env({config.STRICT_LOCATION_ENV: raw})
        assert settings.strict_location_comparison is True

    @pytest.mark.parametrize("raw", ["", "0", "false", "No", "off"])
    def test_falsy(self, raw: str) -> None:
        """Test the accepted falsy spellings."""
        settings = config.Settings.from_env({config.STRICT_LOCATION_ENV: raw})
        assert settings.strict_location_comparison is False

    def test_invalid(self) -> None:
        """Test that unknown values are rejected."""
        with pytest.raises(ConfigurationError, match=config.STRICT_LOCATION_ENV):
            config.Settings.from_env({config.STRICT_LOCATION_ENV: "maybe"})

    def test_lazy_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that get_settings reads the environment after a reset."""
        monkeypatch.setenv(config.STRICT_LOCATION_ENV, "1")
        config.reset_settings()
        assert config.get_settings().strict_location_comparison is True


class TestSameLocation:
    """Tests for the location comparison policy."""

    def test_offset_only(self) -> None:
        """Test the default policy ignores names."""
        assert config.same_location(Timezone.utc(), Timezone(0, "GMT"))
        assert not config.same_location(Timezone.utc(), Timezone(3600))

    def test_strict(self) -> None:
        """Test the strict policy compares names."""
        config.set_settings(config.Settings(strict_location_comparison=True))
        assert not config.same_location(Timezone.utc(), Timezone(0, "GMT"))
        assert config.same_location(Timezone.utc(), Timezone(0, "UTC"))

    def test_zones_compare_by_key(self, berlin: Timezone) -> None:
        """Test that zones match on their key in both policies."""
        assert config.same_location(berlin, Timezone.from_zone("Europe/Berlin"))
        assert not config.same_location(berlin, Timezone(3600, "Europe/Berlin"))
        config.set_settings(config.Settings(strict_location_comparison=True))
        assert config.same_location(berlin, Timezone.from_zone("Europe/Berlin"))
        assert config.same_location(Timezone.local(), Timezone.local())

"""Process-wide settings for Caldate.

Settings are read once from the environment and can be replaced for the
duration of a test with ``set_settings`` / ``reset_settings``.

Environment variables:
    CALDATE_STRICT_LOCATION: When truthy ("1", "true", "yes", "on"),
        two fixed-offset timezones only count as the same location if both
        their offsets and their names match. Otherwise the offset alone
        decides. Zoned and local timezones always compare by key.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from caldate.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from caldate.units.timezone import Timezone

log = logging.getLogger(__name__)

STRICT_LOCATION_ENV = "CALDATE_STRICT_LOCATION"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Library-wide behaviour switches."""

    strict_location_comparison: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If a variable holds an unrecognised value.
        """
        env = os.environ if environ is None else environ
        raw = env.get(STRICT_LOCATION_ENV)
        if raw is None:
            return cls()
        settings = cls(strict_location_comparison=_parse_flag(STRICT_LOCATION_ENV, raw))
        log.debug("Loaded settings from environment: %s", settings)
        return settings


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the active settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the active settings so the next access reloads the environment."""
    global _settings
    _settings = None


def same_location(left: Timezone, right: Timezone) -> bool:
    """Return True if two timezones count as the same location.

    Zoned and local timezones match on their key alone. Fixed offsets
    match on offset, and in strict mode on their names too.

    Examples:
        >>> same_location(Timezone.utc(), Timezone(0))
        True
        >>> same_location(Timezone.from_zone("Europe/Berlin"), Timezone(3600))
        False
    """
    if left.key is not None or right.key is not None:
        return left.key == right.key
    if left.offset_seconds != right.offset_seconds:
        return False
    if get_settings().strict_location_comparison:
        return left.name == right.name
    return True


__all__ = [
    "STRICT_LOCATION_ENV",
    "Settings",
    "get_settings",
    "set_settings",
    "reset_settings",
    "same_location",
]

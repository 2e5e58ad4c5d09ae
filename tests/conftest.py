"""Pytest configuration and fixtures for Caldate tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the parent directory to sys.path so caldate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from caldate import config  # noqa: E402
from caldate.clock import FixedClock, use_clock  # noqa: E402
from caldate.units.timezone import Timezone  # noqa: E402

# Wednesday 2024-06-05, midday UTC
FIXED_NOW = datetime(2024, 6, 5, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fixed_clock():
    """Pin "today" to 2024-06-05 and the default location to UTC."""
    clock = FixedClock(FIXED_NOW, Timezone.utc())
    with use_clock(clock):
        yield clock


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test with default settings and restore them afterwards."""
    config.set_settings(config.Settings())
    yield config.get_settings()
    config.reset_settings()


@pytest.fixture
def utc() -> Timezone:
    return Timezone.utc()


@pytest.fixture
def jst() -> Timezone:
    return Timezone.from_hours(9)


@pytest.fixture
def berlin() -> Timezone:
    """Europe/Berlin: +01:00 in winter, +02:00 in summer."""
    return Timezone.from_zone("Europe/Berlin")

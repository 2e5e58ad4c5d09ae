"""Tests for the swappable clock."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from caldate import clock, config
from caldate.clock import FixedClock, SystemClock, use_clock
from caldate.core.date import Date
from caldate.core.date_range import DateRange
from caldate.core.month import Month
from caldate.units.timezone import Timezone


class TestFixedClock:
    """Tests for FixedClock."""

    def test_now(self) -> None:
        """Test that now is frozen."""
        moment = datetime(2030, 1, 2, tzinfo=timezone.utc)
        assert FixedClock(moment).now() is moment

    def test_location_from_moment(self) -> None:
        """Test that the moment's offset is the default location."""
        moment = datetime(2030, 1, 2, tzinfo=timezone(timedelta(hours=9)))
        assert FixedClock(moment).location().offset_seconds == 9 * 3600

    def test_location_explicit(self) -> None:
        """Test an explicit default location."""
        moment = datetime(2030, 1, 2, tzinfo=timezone.utc)
        tz = Timezone.from_hours(-5)
        assert FixedClock(moment, tz).location() == tz

    def test_location_naive(self) -> None:
        """Test that a naive moment defaults to UTC."""
        assert FixedClock(datetime(2030, 1, 2)).location().is_utc


class TestClockSubstitution:
    """Tests for switching the active clock."""

    def test_use_clock_restores(self, fixed_clock: FixedClock) -> None:
        """Test that the previous clock comes back."""
        other = FixedClock(datetime(1999, 12, 31, tzinfo=timezone.utc))
        with use_clock(other):
            assert clock.get_clock() is other
            assert Date.today().split() == (1999, 12, 31)
            assert Month.current() == Month(1999, 12)
        assert clock.get_clock() is fixed_clock

    def test_use_clock_restores_on_error(self, fixed_clock: FixedClock) -> None:
        """Test restoration when the body raises."""
        other = FixedClock(datetime(1999, 12, 31, tzinfo=timezone.utc))
        with pytest.raises(RuntimeError):
            with use_clock(other):
                raise RuntimeError("boom")
        assert clock.get_clock() is fixed_clock

    def test_today_uses_clock_offset(self) -> None:
        """Test that today is the calendar day in the clock's offset."""
        tokyo = timezone(timedelta(hours=9))
        # 2024-06-05 20:00 UTC is already 2024-06-06 in Tokyo
        moment = datetime(2024, 6, 5, 20, 0, tzinfo=timezone.utc).astimezone(tokyo)
        with use_clock(FixedClock(moment)):
            today = Date.today()
        assert today.split() == (2024, 6, 6)
        assert today.timezone.offset_seconds == 9 * 3600

    def test_default_location(self) -> None:
        """Test that new dates use the clock's location."""
        tz = Timezone.from_hours(2)
        with use_clock(FixedClock(datetime(2024, 6, 5), tz)):
            assert clock.default_location() == tz
            assert Date(2024, 1, 1).timezone == tz
            assert Date.parse("2024-01-01").timezone == tz

    def test_set_and_reset(self) -> None:
        """Test the imperative API."""
        previous = clock.get_clock()
        try:
            clock.reset_clock()
            assert isinstance(clock.get_clock(), SystemClock)
            assert clock.now().tzinfo is not None
        finally:
            clock.set_clock(previous)

    def test_switch_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the debug log on substitution."""
        with caplog.at_level(logging.DEBUG, logger="caldate.clock"):
            with use_clock(FixedClock(datetime(2024, 1, 1))):
                pass
        assert "Switching clock" in caplog.text


class TestTodayLocation:
    """Tests for the location that today is bound to."""

    def test_today_in_default_location(self, berlin: Timezone) -> None:
        """Test that the clock's moment is read in its default location."""
        moment = datetime(2024, 6, 5, 23, 0, tzinfo=timezone.utc)
        with use_clock(FixedClock(moment, berlin)):
            today = Date.today()
            assert today.split() == (2024, 6, 6)
            assert today.timezone == berlin
            assert today == Date(2024, 6, 6)

    def test_today_from_zoned_moment(self, berlin: Timezone) -> None:
        """Test that a ZoneInfo moment makes its zone the default location."""
        moment = datetime(2024, 1, 10, 8, 0, tzinfo=ZoneInfo("Europe/Berlin"))
        with use_clock(FixedClock(moment)):
            assert clock.default_location() == berlin
            assert DateRange(Date.today(), Date(2024, 7, 10)).days() == 183

    def test_system_clock_today_matches_new_dates(self) -> None:
        """Test that today and Date(...) share a location under the system clock."""
        config.set_settings(config.Settings(strict_location_comparison=True))
        with use_clock(SystemClock()):
            today = Date.today()
            later = Date(today.year + 1, 1, 1)
            assert today.timezone == later.timezone
            assert today.timezone.key == "Local"
            assert DateRange(today, later).contains(today.add_day())

    def test_naive_moment_is_wall_clock(self) -> None:
        """Test that a naive moment is taken as the location's wall clock."""
        with use_clock(FixedClock(datetime(2024, 6, 5, 23, 0), Timezone.from_hours(9))):
            assert Date.today().split() == (2024, 6, 5)

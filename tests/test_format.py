"""Tests for strftime-style formatting and parsing."""

from __future__ import annotations

import pytest

from caldate.core.date import Date
from caldate.core.month import Month
from caldate.errors import ParseError
from caldate.format import strftime, strptime
from caldate.units.timezone import Timezone


class TestStrftime:
    """Tests for formatting."""

    def test_basic_layouts(self, utc: Timezone) -> None:
        """Test the numeric directives."""
        d = Date(2024, 3, 1, utc)
        assert strftime(d, "%Y-%m-%d") == "2024-03-01"
        assert strftime(d, "%d.%m.%y") == "01.03.24"
        assert strftime(d, "%Y/%j") == "2024/061"
        assert strftime(d, "100%%") == "100%"

    def test_negative_year(self, utc: Timezone) -> None:
        """Test the sign of BCE years."""
        assert strftime(Date(-44, 3, 15, utc), "%Y") == "-0044"

    def test_month(self) -> None:
        """Test formatting a Month."""
        assert strftime(Month(1999, 12), "%m/%y") == "12/99"

    def test_unsupported(self, utc: Timezone) -> None:
        """Test that locale and time directives are rejected."""
        with pytest.raises(ValueError, match="unsupported strftime directive"):
            strftime(Date(2024, 1, 1, utc), "%B")


class TestStrptime:
    """Tests for parsing."""

    def test_basic(self, utc: Timezone) -> None:
        """Test a full layout."""
        assert strptime("15.01.2024", "%d.%m.%Y") == Date(2024, 1, 15, utc)

    def test_explicit_timezone(self, jst: Timezone) -> None:
        """Test the result location."""
        assert strptime("2024-01-15", "%Y-%m-%d", jst).timezone == jst

    def test_two_digit_year(self) -> None:
        """Test the century pivot."""
        assert strptime("69-01-01", "%y-%m-%d").year == 1969
        assert strptime("68-01-01", "%y-%m-%d").year == 2068

    def test_day_of_year(self) -> None:
        """Test %j."""
        assert strptime("2024-061", "%Y-%j").split() == (2024, 3, 1)
        assert strptime("2023-365", "%Y-%j").split() == (2023, 12, 31)

    def test_day_of_year_out_of_range(self) -> None:
        """Test that day 366 in a common year is impossible."""
        with pytest.raises(ParseError, match="day of year"):
            strptime("2023-366", "%Y-%j")

    def test_day_of_year_mismatch(self) -> None:
        """Test that %j must agree with an explicit month."""
        with pytest.raises(ParseError):
            strptime("2024-02-061", "%Y-%m-%j")

    def test_missing_fields_default(self) -> None:
        """Test that month and day default to 1."""
        assert strptime("2024", "%Y").split() == (2024, 1, 1)
        assert strptime("2024-06", "%Y-%m").split() == (2024, 6, 1)

    def test_mismatch(self) -> None:
        """Test the error for text that does not fit the layout."""
        with pytest.raises(ParseError, match="does not match layout") as exc_info:
            strptime("2024/01/15", "%Y-%m-%d")
        assert exc_info.value.layout == "%Y-%m-%d"

    def test_trailing_text(self) -> None:
        """Test that the whole text must match."""
        with pytest.raises(ParseError):
            strptime("2024-01-15\n", "%Y-%m-%d")

    def test_impossible_date(self) -> None:
        """Test the error for a date that does not exist."""
        with pytest.raises(ParseError, match="failed to parse date '2023-02-29'"):
            strptime("2023-02-29", "%Y-%m-%d")

    def test_regex_characters_in_layout(self) -> None:
        """Test that literal characters are escaped."""
        assert strptime("2024.01.15", "%Y.%m.%d").day == 15
        with pytest.raises(ParseError):
            strptime("2024x01x15", "%Y.%m.%d")

    def test_unsupported(self) -> None:
        """Test that unsupported directives are rejected."""
        with pytest.raises(ValueError, match="unsupported strptime directive"):
            strptime("10:30", "%H:%M")

"""Calendar utilities for Caldate.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: ordinal day numbers, leap year logic,
overflow normalization and floored month arithmetic.

Ordinal 1 = 0001-01-01. Ordinals of zero and below address year 0 and
earlier (astronomical year numbering).

This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_400_YEARS,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
)


def floor_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Divide rounding toward negative infinity.

    The remainder always has the sign of the denominator, so for a
    positive denominator it lies in ``[0, denominator)`` even when the
    numerator is negative.

    Examples:
        >>> floor_divmod(-2, 12)
        (-1, 10)
        >>> floor_divmod(13, 12)
        (1, 1)
    """
    # divmod floors for ints; int(a / b) and math.fmod truncate instead
    return divmod(numerator, denominator)


def shift_month_index(year_index: int, month_index: int, months: int) -> tuple[int, int]:
    """Add months to a zero-based (year, month) pair.

    Args:
        year_index: Zero-based year (year - 1).
        month_index: Zero-based month (0-11).
        months: Number of months to add (can be negative).

    Returns:
        The shifted zero-based (year, month) pair.

    Examples:
        >>> shift_month_index(2023, 0, -2)  # 2024-01 minus two months
        (2022, 10)
    """
    year_delta, new_month_index = floor_divmod(month_index + months, MONTHS_PER_YEAR)
    return year_index + year_delta, new_month_index


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The ordinal for 0001-01-01 is 1 and for 0000-12-31 is 0. Python's
    ``//`` floors toward negative infinity, so the formula holds for
    year 0 and negative years as well.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Non-positive ordinals are shifted forward by whole 400-year cycles,
    which repeat exactly in the Gregorian calendar, converted, and
    shifted back.
    """
    cycles = 0
    if ordinal <= 0:
        cycles = -ordinal // DAYS_PER_400_YEARS + 1
        ordinal += cycles * DAYS_PER_400_YEARS

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1
    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1 - cycles * 400

    # Last day of a leap year at the end of a 4 or 400 year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def normalize_to_ordinal(year: int, month: int, day: int) -> int:
    """Return the ordinal of a possibly overflowing calendar date.

    Months outside 1-12 roll the year, and days outside the month roll
    into neighbouring months, so 2024-01-32 is 2024-02-01 and
    2024-13-01 is 2025-01-01.
    """
    year_delta, month_index = floor_divmod(month - 1, MONTHS_PER_YEAR)
    first_of_month = ymd_to_ordinal(year + year_delta, month_index + 1, 1)
    return first_of_month + day - 1


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the day of the week (Monday=0, Sunday=6).

    0001-01-01 (ordinal 1) was a Monday.
    """
    return (ordinal - 1) % DAYS_PER_WEEK


def ordinal_to_iso_week(ordinal: int) -> tuple[int, int]:
    """Return the ISO 8601 (year, week) for an ordinal.

    The ISO week belongs to the year holding its Thursday.
    """
    thursday = ordinal - ordinal_to_weekday(ordinal) + 3
    iso_year, _, _ = ordinal_to_ymd(thursday)
    week = (thursday - ymd_to_ordinal(iso_year, 1, 1)) // DAYS_PER_WEEK + 1
    return iso_year, week


__all__ = [
    "floor_divmod",
    "shift_month_index",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "normalize_to_ordinal",
    "ordinal_to_weekday",
    "ordinal_to_iso_week",
]

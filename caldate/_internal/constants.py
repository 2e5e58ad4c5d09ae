"""Internal constants for Caldate.

These constants define the limits, layouts and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a full 400-year Gregorian cycle
DAYS_PER_400_YEARS: int = 146_097

# Ordinal of the zero Date: 0001-01-01, as in the proleptic Gregorian count
ZERO_ORDINAL: int = 1

# Canonical layouts
DATE_LAYOUT: str = "%Y-%m-%d"
MONTH_LAYOUT: str = "%Y-%m"

# Separator between the bounds of a DateRange in its text form
RANGE_SEPARATOR: str = "/"

# Token emitted for an absent NullDate
NULL_TOKEN: str = "null"

# Timezone offset limit (in seconds), +/- 14 hours
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_PER_400_YEARS",
    "ZERO_ORDINAL",
    "DATE_LAYOUT",
    "MONTH_LAYOUT",
    "RANGE_SEPARATOR",
    "NULL_TOKEN",
    "MAX_UTC_OFFSET_SECONDS",
]

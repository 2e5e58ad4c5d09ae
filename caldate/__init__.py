"""Caldate: calendar value types for application code.

Caldate provides day-precision dates bound to a timezone, calendar months,
inclusive date ranges and an optional-date wrapper, with leap-year-correct
arithmetic and collection helpers.

Core Types:
    Date: Calendar day bound to a timezone
    Month: Year and month
    DateRange: Inclusive span of days [start, end]
    Dates: Ordered collection of Date
    DateRanges: Ordered collection of DateRange
    NullDate: Optional Date

Units:
    Timezone: UTC offset-based location

Exceptions:
    CaldateError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    DateRangeError: Invalid range bounds
    PreconditionViolation: A ``must_*`` call whose precondition failed

Example:
    >>> from caldate import Date, DateRange
    >>> r = DateRange(Date.parse("2024-01-31"), Date.parse("2024-02-29"))
    >>> r.days()
    30
    >>> Date.parse("2024-02-15") in r
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from caldate.core.date import Date
from caldate.core.date_range import DateRange
from caldate.core.date_ranges import DateRanges
from caldate.core.dates import Dates
from caldate.core.month import Month
from caldate.core.null_date import NullDate

# Units
from caldate.units.timezone import Timezone

# Exceptions
from caldate.errors import (
    AsymmetricZeroError,
    CaldateError,
    DateRangeError,
    EmptyCollectionError,
    EndBeforeStartError,
    MonthRangeError,
    NullValueError,
    ParseError,
    PreconditionViolation,
    RangesDoNotOverlapError,
    ScanError,
    TimezoneError,
    TimezoneMismatchError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateRange",
    "DateRanges",
    "Dates",
    "Month",
    "NullDate",
    # Units
    "Timezone",
    # Exceptions
    "CaldateError",
    "ValidationError",
    "ParseError",
    "DateRangeError",
    "TimezoneMismatchError",
    "AsymmetricZeroError",
    "EndBeforeStartError",
    "MonthRangeError",
    "RangesDoNotOverlapError",
    "EmptyCollectionError",
    "NullValueError",
    "TimezoneError",
    "ScanError",
    "PreconditionViolation",
]

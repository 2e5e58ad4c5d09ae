"""Core calendar types.

This module provides the calendar value types:
    - Date: Calendar day bound to a timezone
    - Month: Year and month
    - DateRange: Inclusive span of days [start, end]
    - Dates: Ordered collection of Date
    - DateRanges: Ordered collection of DateRange
    - NullDate: Optional Date
"""

from __future__ import annotations

from caldate.core.date import Date
from caldate.core.date_range import DateRange
from caldate.core.date_ranges import DateRanges
from caldate.core.dates import Dates
from caldate.core.month import Month
from caldate.core.null_date import NullDate

__all__: list[str] = [
    "Date",
    "DateRange",
    "DateRanges",
    "Dates",
    "Month",
    "NullDate",
]

"""JSON serialization and deserialization for calendar values.

This module provides functions for converting calendar values to and from
JSON-compatible data, plus ``dumps`` / ``loads`` over the standard ``json``
module.

The JSON shapes are untagged, so ``from_json`` and ``loads`` take the type
to build:

    Date        "2024-01-15"
    Month       "2024-01"
    DateRange   {"start": "2024-01-15", "end": "2024-01-20"}
    NullDate    "2024-01-15" or null
    Dates       ["2024-01-15", "2024-01-16"]
    DateRanges  [{"start": ..., "end": ...}, ...]

Examples:
    >>> from caldate import Date, DateRange
    >>> from caldate.convert import dumps, loads

    >>> dumps(DateRange.parse("2024-01-15", "2024-01-20"))
    '{"start": "2024-01-15", "end": "2024-01-20"}'

    >>> loads(Date, '"2024-01-15"').day
    15
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar, Union

from caldate.errors import ParseError

if TYPE_CHECKING:
    from caldate.core.date import Date
    from caldate.core.date_range import DateRange
    from caldate.core.date_ranges import DateRanges
    from caldate.core.dates import Dates
    from caldate.core.month import Month
    from caldate.core.null_date import NullDate

CalendarType = Union["Date", "Month", "DateRange", "NullDate", "Dates", "DateRanges"]
T = TypeVar("T")


def to_json(value: CalendarType) -> Any:
    """Convert a calendar value to JSON-compatible data.

    Raises:
        TypeError: If value is not a supported calendar type.

    Examples:
        >>> from caldate import NullDate
        >>> to_json(NullDate.null()) is None
        True
    """
    # Import here to avoid circular imports
    from caldate.core.date import Date
    from caldate.core.date_range import DateRange
    from caldate.core.date_ranges import DateRanges
    from caldate.core.dates import Dates
    from caldate.core.month import Month
    from caldate.core.null_date import NullDate

    if isinstance(value, (Date, Month, DateRange, NullDate)):
        return value.to_json()
    elif isinstance(value, (Dates, DateRanges)):
        return [item.to_json() for item in value]
    else:
        raise TypeError(
            f"expected Date, Month, DateRange, NullDate, Dates or DateRanges, got {type(value).__name__}"
        )


def from_json(kind: type[T], data: Any) -> T:
    """Create a calendar value of type ``kind`` from JSON-compatible data.

    Raises:
        ParseError: If the data has the wrong shape or invalid text.
        TypeError: If ``kind`` is not a supported calendar type.

    Examples:
        >>> from caldate import Month
        >>> from_json(Month, "2024-06")
        Month(2024, 6)
    """
    from caldate.core.date import Date
    from caldate.core.date_range import DateRange
    from caldate.core.date_ranges import DateRanges
    from caldate.core.dates import Dates
    from caldate.core.month import Month
    from caldate.core.null_date import NullDate

    if kind in (Date, Month, DateRange, NullDate):
        return kind.from_json(data)  # type: ignore[attr-defined,no-any-return]
    elif kind is Dates:
        return Dates(Date.from_json(item) for item in _expect_list(data, kind))  # type: ignore[return-value]
    elif kind is DateRanges:
        return DateRanges(DateRange.from_json(item) for item in _expect_list(data, kind))  # type: ignore[return-value]
    else:
        raise TypeError(f"unknown calendar type: {kind!r}")


def _expect_list(data: Any, kind: type) -> list[Any]:
    if not isinstance(data, list):
        raise ParseError(f"expected list for {kind.__name__}, got {type(data).__name__}")
    return data


def dumps(value: CalendarType) -> str:
    """Serialize a calendar value to a JSON document."""
    return json.dumps(to_json(value))


def loads(kind: type[T], text: str | bytes) -> T:
    """Parse a JSON document into a calendar value of type ``kind``.

    Raises:
        ParseError: If the document is not valid JSON or has the wrong shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON for {kind.__name__}: {exc}") from exc
    return from_json(kind, data)


__all__ = ["to_json", "from_json", "dumps", "loads"]

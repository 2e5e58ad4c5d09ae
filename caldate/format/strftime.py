"""strftime-style formatting and parsing.

This module provides strftime-style formatting for calendar values. It
supports a small subset of format directives that covers date layouts
while avoiding locale-dependent behavior.

Supported Directives:
    %Y - 4-digit year (e.g., 2024; negative years format as -0044)
    %y - 2-digit year (69-99 parse as 19xx, 00-68 as 20xx)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %j - 3-digit day of year (001-366)
    %% - Literal %

Not Supported (locale-dependent or sub-day):
    %a, %A, %b, %B - Weekday and month names
    %H, %M, %S, %f - Time of day
    %z, %Z - UTC offsets

Functions:
    strftime: Format a Date or Month using a layout.
    strptime: Parse a string into a Date using a layout.

Examples:
    >>> from caldate import Date, Timezone
    >>> from caldate.format import strftime, strptime

    >>> strftime(Date(2024, 1, 15, Timezone.utc()), "%d.%m.%Y")
    '15.01.2024'

    >>> strptime("15.01.2024", "%d.%m.%Y", Timezone.utc())
    Date(2024, 1, 15, timezone='UTC')
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from caldate._internal.calendar import days_before_month, days_in_year, ordinal_to_ymd, ymd_to_ordinal
from caldate.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from caldate.core.date import Date
    from caldate.core.month import Month
    from caldate.units.timezone import Timezone

CalendarType = Union["Date", "Month"]

_SUPPORTED = "%Y, %y, %m, %d, %j, %%"

# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>-?\d{4})",
    "%y": r"(?P<short_year>\d{2})",
    "%m": r"(?P<month>\d{2})",
    "%d": r"(?P<day>\d{2})",
    "%j": r"(?P<year_day>\d{3})",
    "%%": r"%",
}


def strftime(value: CalendarType, layout: str) -> str:
    """Format a Date or Month using a strftime-style layout.

    A Month formats as the first day of the month, so ``%d`` yields ``01``.

    Args:
        value: A Date or Month to format.
        layout: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If the layout contains unsupported directives.

    Examples:
        >>> from caldate import Date, Month, Timezone

        >>> strftime(Date(2024, 3, 1, Timezone.utc()), "%Y/%j")
        '2024/061'

        >>> strftime(Month(1999, 12), "%m/%y")
        '12/99'
    """
    result = []
    i = 0
    while i < len(layout):
        if layout[i] == "%" and i + 1 < len(layout):
            directive = layout[i : i + 2]
            result.append(_format_directive(value, directive))
            i += 2
        else:
            result.append(layout[i])
            i += 1

    return "".join(result)


def _format_directive(value: CalendarType, directive: str) -> str:
    if directive == "%%":
        return "%"

    year = value.year
    month = value.month
    day = getattr(value, "day", 1)

    if directive == "%Y":
        if year >= 0:
            return f"{year:04d}"
        return f"{year:05d}"  # Include minus sign

    elif directive == "%y":
        return f"{year % 100:02d}"

    elif directive == "%m":
        return f"{month:02d}"

    elif directive == "%d":
        return f"{day:02d}"

    elif directive == "%j":
        return f"{days_before_month(year, month) + day:03d}"

    else:
        raise ValueError(f"unsupported strftime directive: {directive}. Supported: {_SUPPORTED}")


def strptime(text: str, layout: str, timezone: Timezone | None = None) -> Date:
    """Parse a string into a Date using a strftime-style layout.

    Args:
        text: The string to parse.
        layout: Format string with %-directives.
        timezone: Location of the result; defaults to the clock's location.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the text does not match the layout or names an
            impossible date.
        ValueError: If the layout contains unsupported directives.

    Notes:
        The whole text must match. Missing month and day default to 1,
        so ``"%Y-%m"`` parses a month to its first day.

    Examples:
        >>> strptime("2024-02-30", "%Y-%m-%d")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: failed to parse date '2024-02-30' with layout '%Y-%m-%d': ...
    """
    from caldate.core.date import Date

    pattern = _layout_to_regex(layout)

    match = re.match(pattern, text)
    if not match:
        raise ParseError(
            f"failed to parse date {text!r} with layout {layout!r}: text does not match layout",
            text,
            layout,
        )

    groups = match.groupdict()

    if groups.get("year") is not None:
        year = int(groups["year"])
    elif groups.get("short_year") is not None:
        short_year = int(groups["short_year"])
        year = 1900 + short_year if short_year >= 69 else 2000 + short_year
    else:
        year = 1

    month = int(groups["month"]) if groups.get("month") is not None else 1
    day = int(groups["day"]) if groups.get("day") is not None else 1

    try:
        if groups.get("year_day") is not None:
            year, month, day = _resolve_year_day(year, int(groups["year_day"]), groups)
        return Date(year, month, day, timezone)
    except ValidationError as exc:
        raise ParseError(f"failed to parse date {text!r} with layout {layout!r}: {exc}", text, layout) from exc


def _resolve_year_day(year: int, year_day: int, groups: dict[str, str | None]) -> tuple[int, int, int]:
    if not 1 <= year_day <= days_in_year(year):
        raise ValidationError(f"day of year must be 1-{days_in_year(year)}, got {year_day}")
    resolved = ordinal_to_ymd(ymd_to_ordinal(year, 1, 1) + year_day - 1)
    # An explicit month or day must agree with the day of year
    if groups.get("month") is not None and int(groups["month"]) != resolved[1]:
        raise ValidationError(f"day of year {year_day} is not in month {groups['month']}")
    if groups.get("day") is not None and int(groups["day"]) != resolved[2]:
        raise ValidationError(f"day of year {year_day} is not day {groups['day']}")
    return resolved


def _layout_to_regex(layout: str) -> str:
    """Convert a strftime layout to an anchored regex pattern.

    Raises:
        ValueError: If the layout contains unsupported directives.
    """
    result = []
    i = 0
    while i < len(layout):
        if layout[i] == "%" and i + 1 < len(layout):
            directive = layout[i : i + 2]
            if directive in _PARSE_PATTERNS:
                result.append(_PARSE_PATTERNS[directive])
            else:
                raise ValueError(f"unsupported strptime directive: {directive}. Supported: {_SUPPORTED}")
            i += 2
        else:
            # Escape regex special characters
            result.append(re.escape(layout[i]))
            i += 1

    return "^" + "".join(result) + r"\Z"


__all__ = ["strftime", "strptime"]

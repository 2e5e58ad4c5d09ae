"""Calendar value formatting and parsing.

Functions:
    strftime: Format a Date or Month using a strftime-style layout.
    strptime: Parse a string into a Date using a strftime-style layout.

Examples:
    >>> from caldate import Date, Timezone
    >>> from caldate.format import strftime

    >>> strftime(Date(2024, 1, 15, Timezone.utc()), "%Y%m%d")
    '20240115'
"""

from __future__ import annotations

from caldate.format.strftime import strftime, strptime

__all__: list[str] = [
    "strftime",
    "strptime",
]

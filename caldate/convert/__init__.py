"""Calendar value conversion utilities.

This module provides functions for converting calendar values to and from
JSON.

Examples:
    >>> from caldate import Date
    >>> from caldate.convert import to_json, from_json

    >>> d = Date.parse("2024-01-15")
    >>> from_json(Date, to_json(d)) == d
    True
"""

from __future__ import annotations

from caldate.convert.json import dumps, from_json, loads, to_json

__all__ = [
    "to_json",
    "from_json",
    "dumps",
    "loads",
]

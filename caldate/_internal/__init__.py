"""Internal utilities for Caldate.

This module contains private implementation details:
    - Calendar arithmetic (ordinals, floored month math, ISO weeks)
    - Validation helpers
    - Constants and canonical layouts
    - The @must decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.decorators import must
from caldate._internal.validation import (
    validate_day,
    validate_int,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "must",
    "validate_day",
    "validate_int",
    "validate_month",
    "validate_year",
]

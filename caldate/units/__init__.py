"""Calendar units.

This module provides:
    - Timezone: UTC offset-based location a Date is bound to
"""

from __future__ import annotations

from caldate.units.timezone import Timezone

__all__: list[str] = [
    "Timezone",
]

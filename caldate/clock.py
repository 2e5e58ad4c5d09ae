"""Source of "now" and of the default location.

Every factory that needs the current day (``Date.today()``,
``Month.current()``) or a default timezone (``Date(2024, 1, 15)``) asks the
active Clock. The active clock is process-wide configuration: swap it with
``use_clock`` in tests and let the context manager restore the previous
one. Swapping clocks from several threads at once is undefined behaviour,
so tests that substitute the clock must not run in parallel with each
other.

Examples:
    >>> from datetime import datetime, timezone
    >>> from caldate import Date
    >>> from caldate.clock import FixedClock, use_clock

    >>> with use_clock(FixedClock(datetime(2024, 6, 5, 15, 0, tzinfo=timezone.utc))):
    ...     Date.today()
    Date(2024, 6, 5, timezone='UTC')
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from caldate.units.timezone import Timezone

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> datetime: ...

    def location(self) -> Timezone: ...


class SystemClock:
    """The wall clock and the system's local zone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def location(self) -> Timezone:
        return Timezone.local()

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """A clock frozen at one moment.

    The default location is ``default_location`` if given, else the
    moment's own location, else UTC for a naive moment.
    """

    moment: datetime
    default_location: Timezone | None = None

    def now(self) -> datetime:
        return self.moment

    def location(self) -> Timezone:
        if self.default_location is not None:
            return self.default_location
        if self.moment.tzinfo is not None:
            return Timezone.from_datetime(self.moment)
        return Timezone.utc()


_SYSTEM_CLOCK = SystemClock()
_clock: Clock = _SYSTEM_CLOCK


def get_clock() -> Clock:
    """Return the active clock."""
    return _clock


def set_clock(clock: Clock) -> None:
    """Make ``clock`` the active clock until ``reset_clock`` is called."""
    global _clock
    log.debug("Switching clock to %r", clock)
    _clock = clock


def reset_clock() -> None:
    """Restore the system clock."""
    set_clock(_SYSTEM_CLOCK)


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Activate ``clock`` for the body of a ``with`` block.

    The previously active clock is restored on exit, including when the
    body raises.
    """
    previous = _clock
    set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)


def now() -> datetime:
    """Return the active clock's current moment."""
    return _clock.now()


def default_location() -> Timezone:
    """Return the active clock's default location."""
    return _clock.location()


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_clock",
    "set_clock",
    "reset_clock",
    "use_clock",
    "now",
    "default_location",
]

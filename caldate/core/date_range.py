"""DateRange class representing an inclusive span of days.

A DateRange holds a start and an end Date bound to the same location,
with ``start <= end``. Both ends are included, so a range whose start
equals its end covers exactly one day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from caldate._internal.constants import DATE_LAYOUT, RANGE_SEPARATOR
from caldate._internal.decorators import must
from caldate.config import same_location
from caldate.core.date import Date
from caldate.errors import (
    AsymmetricZeroError,
    EndBeforeStartError,
    ParseError,
    RangesDoNotOverlapError,
    TimezoneMismatchError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from caldate.core.dates import Dates
    from caldate.units.timezone import Timezone


class DateRange:
    """An inclusive range of calendar days.

    ``DateRange.zero()`` (both ends zero) stands for "unset". A range with
    only one zero end cannot be built.

    Examples:
        >>> utc = Timezone.utc()
        >>> r = DateRange(Date(2024, 6, 1, utc), Date(2024, 6, 30, utc))
        >>> r.days()
        30
        >>> str(r)
        '2024-06-01/2024-06-30'
        >>> Date(2024, 6, 15, utc) in r
        True
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Date, end: Date) -> None:
        """Create a DateRange.

        Raises:
            TimezoneMismatchError: If the ends are in different locations.
            AsymmetricZeroError: If exactly one end is the zero Date.
            EndBeforeStartError: If ``end`` is before ``start``.
        """
        if not same_location(start.timezone, end.timezone):
            raise TimezoneMismatchError()
        if start.is_zero != end.is_zero:
            raise AsymmetricZeroError()
        if end.before(start):
            raise EndBeforeStartError()

        self._start: Date = start
        self._end: Date = end

    @classmethod
    def zero(cls) -> DateRange:
        """Return the zero DateRange, both ends the zero Date."""
        return cls(Date.zero(), Date.zero())

    @classmethod
    @must
    def must_new(cls, start: Date, end: Date) -> DateRange:
        return cls(start, end)

    @classmethod
    def parse(cls, start: str, end: str) -> DateRange:
        """Build a range from two canonical YYYY-MM-DD strings.

        Raises:
            ParseError: If either bound is malformed; the message names
                which one.
            DateRangeError: If the parsed dates do not form a valid range.

        Examples:
            >>> DateRange.parse("2024-06-01", "2024-06-07").days()
            7
        """
        return cls.custom_parse(DATE_LAYOUT, start, end)

    @classmethod
    @must
    def must_parse(cls, start: str, end: str) -> DateRange:
        return cls.parse(start, end)

    @classmethod
    def custom_parse(cls, layout: str, start: str, end: str) -> DateRange:
        """Build a range from two strings sharing one strftime-style layout."""
        try:
            start_date = Date.custom_parse(layout, start)
        except ParseError as exc:
            raise ParseError(f"unable to parse the start date: {exc}", start, layout) from exc
        try:
            end_date = Date.custom_parse(layout, end)
        except ParseError as exc:
            raise ParseError(f"unable to parse the end date: {exc}", end, layout) from exc
        return cls(start_date, end_date)

    @classmethod
    @must
    def must_custom_parse(cls, layout: str, start: str, end: str) -> DateRange:
        return cls.custom_parse(layout, start, end)

    @classmethod
    def from_string(cls, text: str) -> DateRange:
        """Parse the ``start/end`` form produced by ``str()``.

        Raises:
            ParseError: If the separator is missing or a bound is malformed.
        """
        start, sep, end = text.partition(RANGE_SEPARATOR)
        if not sep:
            raise ParseError(f"missing {RANGE_SEPARATOR!r} in date range {text!r}", text)
        return cls.parse(start, end)

    # Determination
    # --------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self._start.is_zero and self._end.is_zero

    @property
    def only_one_day(self) -> bool:
        """Return True if the range covers a single day."""
        return self._start.equal(self._end)

    def equal(self, other: DateRange) -> bool:
        return self._start.equal(other._start) and self._end.equal(other._end)

    def not_equal(self, other: DateRange) -> bool:
        return not self.equal(other)

    def starts_on(self, date: Date) -> bool:
        return self._start.equal(date)

    def starts_on_same_date(self, other: DateRange) -> bool:
        return self.starts_on(other._start)

    def starts_before(self, other: DateRange) -> bool:
        return self._start.before(other._start)

    def starts_before_or_equal(self, other: DateRange) -> bool:
        return self._start.before_or_equal(other._start)

    def starts_after(self, other: DateRange) -> bool:
        return self._start.after(other._start)

    def starts_after_or_equal(self, other: DateRange) -> bool:
        return self._start.after_or_equal(other._start)

    def ends_on(self, date: Date) -> bool:
        return self._end.equal(date)

    def ends_on_same_date(self, other: DateRange) -> bool:
        return self.ends_on(other._end)

    def ends_before(self, other: DateRange) -> bool:
        return self._end.before(other._end)

    def ends_before_or_equal(self, other: DateRange) -> bool:
        return self._end.before_or_equal(other._end)

    def ends_after(self, other: DateRange) -> bool:
        return self._end.after(other._end)

    def ends_after_or_equal(self, other: DateRange) -> bool:
        return self._end.after_or_equal(other._end)

    def contains(self, date: Date) -> bool:
        """Return True if ``date`` lies within the range, ends included."""
        return self._start.before_or_equal(date) and self._end.after_or_equal(date)

    def overlaps_with(self, other: DateRange) -> bool:
        """Return True if the two ranges share at least one day.

        Ranges that merely touch (one ends the day the other starts) overlap.
        """
        return self._end.after_or_equal(other._start) and other._end.after_or_equal(self._start)

    # Ordering: by start, ties broken by end.

    def less_than(self, other: DateRange) -> bool:
        if self._start.equal(other._start):
            return self._end.before(other._end)
        return self._start.before(other._start)

    def less_than_or_equal(self, other: DateRange) -> bool:
        return self.equal(other) or self.less_than(other)

    def greater_than(self, other: DateRange) -> bool:
        return not self.less_than_or_equal(other)

    def greater_than_or_equal(self, other: DateRange) -> bool:
        return not self.less_than(other)

    # Accessors
    # --------------------------------------------------

    @property
    def start(self) -> Date:
        return self._start

    @property
    def end(self) -> Date:
        return self._end

    @property
    def timezone(self) -> Timezone:
        return self._start.timezone

    def days(self) -> int:
        """Return the number of days covered, counting both ends."""
        return (self._end - self._start).days + 1

    def dates(self) -> Dates:
        """Return every day of the range in ascending order."""
        from caldate.core.dates import Dates

        return Dates(self._start.add_days(i) for i in range(self.days()))

    def get_overlapping(self, other: DateRange) -> DateRange:
        """Return the days shared by both ranges.

        Raises:
            RangesDoNotOverlapError: If the ranges share no day.

        Examples:
            >>> a = DateRange.parse("2024-06-01", "2024-06-10")
            >>> b = DateRange.parse("2024-06-05", "2024-06-20")
            >>> str(a.get_overlapping(b))
            '2024-06-05/2024-06-10'
        """
        from caldate.core.dates import Dates

        if not self.overlaps_with(other):
            raise RangesDoNotOverlapError()
        start = Dates([self._start, other._start]).max()
        end = Dates([self._end, other._end]).min()
        return DateRange(start, end)

    def to_json(self) -> dict[str, str]:
        return {"start": self._start.to_json(), "end": self._end.to_json()}

    @classmethod
    def from_json(cls, data: object) -> DateRange:
        """Create a DateRange from a ``{"start": ..., "end": ...}`` payload."""
        if not isinstance(data, dict):
            raise ParseError(f"expected dict for DateRange, got {type(data).__name__}")
        try:
            start, end = data["start"], data["end"]
        except KeyError as exc:
            raise ParseError(f"missing {exc.args[0]!r} in DateRange payload") from exc
        if not isinstance(start, str) or not isinstance(end, str):
            raise ParseError("DateRange bounds must be strings")
        return cls.parse(start, end)

    # Operators
    # --------------------------------------------------

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Date):
            return False
        return self.contains(item)

    def __iter__(self) -> Iterator[Date]:
        return iter(self.dates())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"DateRange({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        return f"{self._start}{RANGE_SEPARATOR}{self._end}"

    def __bool__(self) -> bool:
        """The zero DateRange is falsy."""
        return not self.is_zero


__all__ = ["DateRange"]

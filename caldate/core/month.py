"""Month class representing a calendar month.

A Month is a year plus a month number. It is stored as zero-based offsets
(year - 1, month - 1) so that the all-zero value is a legitimate month,
January of year 1, which doubles as the "unset" sentinel.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from caldate._internal.calendar import shift_month_index
from caldate._internal.constants import MONTH_LAYOUT
from caldate._internal.decorators import must
from caldate._internal.validation import validate_int, validate_month
from caldate.errors import MonthRangeError, ParseError

if TYPE_CHECKING:
    from caldate.core.date import Date
    from caldate.core.date_range import DateRange
    from caldate.core.dates import Dates
    from caldate.units.timezone import Timezone


class Month:
    """A calendar month in the proleptic Gregorian calendar.

    Months have no timezone of their own; conversions to Date use the
    timezone passed in, or the clock's default location.

    Examples:
        >>> Month(2024, 1).add_months(-2)
        Month(2023, 11)
        >>> str(Month(2024, 6))
        '2024-06'
        >>> Month(2024, 2).days()
        29
    """

    __slots__ = ("_y", "_m")

    def __init__(self, year: int, month: int) -> None:
        """Create a Month.

        Raises:
            ValidationError: If month is outside 1-12.
        """
        validate_int("year", year)
        validate_int("month", month)
        validate_month(month)
        self._y: int = year - 1
        self._m: int = month - 1

    @classmethod
    def _create(cls, year_index: int, month_index: int) -> Month:
        instance: Month = object.__new__(cls)
        instance._y = year_index
        instance._m = month_index
        return instance

    @classmethod
    def zero(cls) -> Month:
        """Return the zero Month, January of year 1."""
        return cls._create(0, 0)

    @classmethod
    def from_date(cls, date: Date) -> Month:
        return cls(date.year, date.month)

    @classmethod
    def from_datetime(cls, moment: _datetime.date) -> Month:
        return cls(moment.year, moment.month)

    @classmethod
    def parse(cls, text: str) -> Month:
        """Parse a month in the canonical YYYY-MM form.

        Raises:
            ParseError: If the text is not a valid year-month.

        Examples:
            >>> Month.parse("2024-06")
            Month(2024, 6)
        """
        from caldate.format.strftime import strptime

        try:
            date = strptime(text, MONTH_LAYOUT)
        except ParseError as exc:
            raise ParseError(f"unable to parse the year-month: {exc}", text, MONTH_LAYOUT) from exc
        return cls.from_date(date)

    @classmethod
    @must
    def must_parse(cls, text: str) -> Month:
        return cls.parse(text)

    @classmethod
    def current(cls) -> Month:
        """Return the month of today according to the active clock."""
        from caldate.core.date import Date

        return cls.from_date(Date.today())

    @classmethod
    def next(cls) -> Month:
        return cls.current().add_month()

    @classmethod
    def last(cls) -> Month:
        return cls.current().sub_month()

    # Determination
    # --------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self._y == 0 and self._m == 0

    @property
    def is_january(self) -> bool:
        return self.month == 1

    @property
    def is_february(self) -> bool:
        return self.month == 2

    @property
    def is_march(self) -> bool:
        return self.month == 3

    @property
    def is_april(self) -> bool:
        return self.month == 4

    @property
    def is_may(self) -> bool:
        return self.month == 5

    @property
    def is_june(self) -> bool:
        return self.month == 6

    @property
    def is_july(self) -> bool:
        return self.month == 7

    @property
    def is_august(self) -> bool:
        return self.month == 8

    @property
    def is_september(self) -> bool:
        return self.month == 9

    @property
    def is_october(self) -> bool:
        return self.month == 10

    @property
    def is_november(self) -> bool:
        return self.month == 11

    @property
    def is_december(self) -> bool:
        return self.month == 12

    @property
    def is_past(self) -> bool:
        return self.before(Month.current())

    @property
    def is_future(self) -> bool:
        return self.after(Month.current())

    @property
    def is_current_month(self) -> bool:
        return self.equal(Month.current())

    @property
    def is_next_month(self) -> bool:
        return self.equal(Month.next())

    @property
    def is_last_month(self) -> bool:
        return self.equal(Month.last())

    # Comparison
    # --------------------------------------------------

    def compare(self, other: Month) -> int:
        """Return 1 if after ``other``, 0 if equal, -1 if before."""
        if self.after(other):
            return 1
        if self.equal(other):
            return 0
        return -1

    def equal(self, other: Month) -> bool:
        return self._y == other._y and self._m == other._m

    def not_equal(self, other: Month) -> bool:
        return not self.equal(other)

    def after(self, other: Month) -> bool:
        return self._y > other._y or (self._y == other._y and self._m > other._m)

    def after_or_equal(self, other: Month) -> bool:
        return self.equal(other) or self.after(other)

    def before(self, other: Month) -> bool:
        return self._y < other._y or (self._y == other._y and self._m < other._m)

    def before_or_equal(self, other: Month) -> bool:
        return self.equal(other) or self.before(other)

    def between(self, start: Month, end: Month) -> bool:
        """Check whether this month lies in [start, end].

        Raises:
            MonthRangeError: If ``start`` is after ``end``.
        """
        if start.after(end):
            raise MonthRangeError()
        return start.before_or_equal(self) and end.after_or_equal(self)

    # Arithmetic
    # --------------------------------------------------

    def add_month(self) -> Month:
        return self.add_months(1)

    def add_months(self, months: int) -> Month:
        """Return the month ``months`` later (earlier when negative).

        Uses floored division, so January minus two months is November of
        the previous year.

        Examples:
            >>> Month(2024, 11).add_months(2)
            Month(2025, 1)
        """
        return Month._create(*shift_month_index(self._y, self._m, months))

    def sub_month(self) -> Month:
        return self.sub_months(1)

    def sub_months(self, months: int) -> Month:
        return self.add_months(-months)

    def add_year(self) -> Month:
        return self.add_years(1)

    def add_years(self, years: int) -> Month:
        return Month._create(self._y + years, self._m)

    def sub_year(self) -> Month:
        return self.sub_years(1)

    def sub_years(self, years: int) -> Month:
        return self.add_years(-years)

    # Conversion
    # --------------------------------------------------

    @property
    def year(self) -> int:
        return self._y + 1

    @property
    def month(self) -> int:
        return self._m + 1

    def first_date(self, timezone: Timezone | None = None) -> Date:
        """Return the first day of this month."""
        from caldate.core.date import Date

        return Date(self.year, self.month, 1, timezone)

    def last_date(self, timezone: Timezone | None = None) -> Date:
        """Return the last day of this month (first of next month minus one day)."""
        return self.add_month().first_date(timezone).sub_day()

    def to_date_range(self, timezone: Timezone | None = None) -> DateRange:
        """Return the inclusive range covering the whole month."""
        from caldate.core.date_range import DateRange

        return DateRange(self.first_date(timezone), self.last_date(timezone))

    def days(self) -> int:
        """Return the number of days in this month."""
        return self.to_date_range().days()

    def dates(self, timezone: Timezone | None = None) -> Dates:
        """Return every day of this month in ascending order."""
        return self.to_date_range(timezone).dates()

    def split(self) -> tuple[int, int]:
        return self.year, self.month

    def format(self, layout: str) -> str:
        """Format the first day of this month with a strftime-style layout."""
        return self.first_date().format(layout)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, data: object) -> Month:
        if not isinstance(data, str):
            raise ParseError(f"expected str for Month, got {type(data).__name__}")
        return cls.parse(data)

    # Operators
    # --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.before_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.after_or_equal(other)

    def __hash__(self) -> int:
        return hash((self._y, self._m))

    def __repr__(self) -> str:
        return f"Month({self.year}, {self.month})"

    def __str__(self) -> str:
        """Return YYYY-MM; the year widens past four digits when needed.

        Examples:
            >>> str(Month(-1, 1))
            '-0001-01'
            >>> str(Month(10000, 1))
            '10000-01'
        """
        if self.year < 0:
            return f"{self.year:05d}-{self.month:02d}"
        return f"{self.year:04d}-{self.month:02d}"

    def __bool__(self) -> bool:
        """The zero Month is falsy."""
        return not self.is_zero


__all__ = ["Month"]

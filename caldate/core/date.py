"""Date class representing a calendar day bound to a timezone.

This module provides the Date class for representing calendar days in the
proleptic Gregorian calendar. A Date stands for midnight of its day in its
own timezone, so two Dates compare as absolute instants.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, overload

from caldate import clock
from caldate._internal.calendar import (
    days_before_month,
    is_leap_year,
    normalize_to_ordinal,
    ordinal_to_iso_week,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from caldate._internal.constants import DATE_LAYOUT, DAYS_PER_WEEK, SECONDS_PER_DAY, ZERO_ORDINAL
from caldate._internal.decorators import must
from caldate._internal.validation import validate_day, validate_int, validate_month, validate_year
from caldate.errors import ParseError, ValidationError
from caldate.units.timezone import Timezone

if TYPE_CHECKING:
    from caldate.core.month import Month
    from caldate.core.null_date import NullDate


class Date:
    """A calendar day in the proleptic Gregorian calendar.

    A Date holds a year, month and day plus the Timezone it belongs to.
    When no timezone is given the active clock's default location is used
    (see ``caldate.clock``).

    ``Date.zero()`` is a sentinel meaning "unset". It reads as 0001-01-01
    in UTC through its accessors, orders before every real date, and is
    equal only to other zero Dates.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month (1-12).
        day: The day of the month (1-31).
        timezone: The location the day belongs to.

    Examples:
        >>> d = Date(2024, 1, 15, Timezone.utc())
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 1, 31, Timezone.utc()).add_months(1)
        Date(2024, 2, 29, timezone='UTC')
    """

    __slots__ = ("_ordinal", "_timezone", "_is_zero")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        timezone: Timezone | None = None,
    ) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (-9999 to 9999).
            month: The month (1-12).
            day: The day of the month.
            timezone: The location; defaults to the clock's location.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_int("year", year)
        validate_int("month", month)
        validate_int("day", day)
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._ordinal: int = ymd_to_ordinal(year, month, day)
        self._timezone: Timezone = timezone if timezone is not None else clock.default_location()
        self._is_zero: bool = False

    @classmethod
    def _create(cls, ordinal: int, timezone: Timezone, is_zero: bool = False) -> Date:
        """Internal factory that bypasses component validation."""
        instance: Date = object.__new__(cls)
        instance._ordinal = ordinal
        instance._timezone = timezone
        instance._is_zero = is_zero
        return instance

    @classmethod
    def _from_ordinal(cls, ordinal: int, timezone: Timezone) -> Date:
        year, _, _ = ordinal_to_ymd(ordinal)
        validate_year(year)
        return cls._create(ordinal, timezone)

    @classmethod
    def zero(cls) -> Date:
        """Return the zero Date sentinel."""
        return cls._create(ZERO_ORDINAL, Timezone.utc(), is_zero=True)

    @classmethod
    def normalize(
        cls,
        year: int,
        month: int,
        day: int,
        timezone: Timezone | None = None,
    ) -> Date:
        """Create a Date, rolling overflowing months and days over.

        Examples:
            >>> Date.normalize(2024, 1, 32, Timezone.utc())
            Date(2024, 2, 1, timezone='UTC')
            >>> Date.normalize(2024, 13, 1, Timezone.utc())
            Date(2025, 1, 1, timezone='UTC')
            >>> Date.normalize(2024, 3, 0, Timezone.utc())
            Date(2024, 2, 29, timezone='UTC')
        """
        if timezone is None:
            timezone = clock.default_location()
        return cls._from_ordinal(normalize_to_ordinal(year, month, day), timezone)

    @classmethod
    def from_datetime(cls, moment: _datetime.date) -> Date:
        """Create a Date from a moment in time, dropping the time of day.

        Aware datetimes keep their own location as the Date's timezone: a
        ``ZoneInfo`` stays a zone, any other tzinfo becomes its fixed offset.
        Naive datetimes and plain ``datetime.date`` values are read in the
        clock's default location.

        Examples:
            >>> from datetime import datetime, timezone, timedelta
            >>> jst = timezone(timedelta(hours=9))
            >>> Date.from_datetime(datetime(2024, 6, 5, 23, 59, tzinfo=jst))
            Date(2024, 6, 5, timezone='+09:00')
        """
        if isinstance(moment, _datetime.datetime) and moment.tzinfo is not None:
            timezone = Timezone.from_datetime(moment)
        else:
            timezone = clock.default_location()
        return cls(moment.year, moment.month, moment.day, timezone)

    @classmethod
    def today(cls) -> Date:
        """Return the current day in the active clock's default location.

        The clock's moment is converted into that location first, so
        ``Date.today()`` and ``Date(y, m, d)`` are always the same location.
        """
        location = clock.default_location()
        moment = location.convert(clock.now())
        return cls(moment.year, moment.month, moment.day, location)

    @classmethod
    def yesterday(cls) -> Date:
        """Return the day before today."""
        return cls.today().sub_day()

    @classmethod
    def tomorrow(cls) -> Date:
        """Return the day after today."""
        return cls.today().add_day()

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a date in the canonical YYYY-MM-DD form.

        Raises:
            ParseError: If the text is malformed or names an impossible date.

        Examples:
            >>> Date.parse("2024-02-29").day
            29
        """
        return cls.custom_parse(DATE_LAYOUT, text)

    @classmethod
    @must
    def must_parse(cls, text: str) -> Date:
        """Parse a canonical date, treating failure as a broken precondition."""
        return cls.parse(text)

    @classmethod
    def custom_parse(cls, layout: str, text: str) -> Date:
        """Parse a date using a strftime-style layout.

        The result is bound to the clock's default location.

        Raises:
            ParseError: If the text does not match the layout.

        Examples:
            >>> Date.custom_parse("%d/%m/%Y", "05/06/2024").month
            6
        """
        from caldate.format.strftime import strptime

        return strptime(text, layout)

    @classmethod
    @must
    def must_custom_parse(cls, layout: str, text: str) -> Date:
        """Parse with a layout, treating failure as a broken precondition."""
        return cls.custom_parse(layout, text)

    # Determination
    # --------------------------------------------------

    @property
    def is_zero(self) -> bool:
        """Return True for the zero Date sentinel."""
        return self._is_zero

    @property
    def is_first_of_month(self) -> bool:
        return self.day == 1

    @property
    def is_last_of_month(self) -> bool:
        return self.add_day().day == 1

    @property
    def is_monday(self) -> bool:
        return self.weekday == 0

    @property
    def is_tuesday(self) -> bool:
        return self.weekday == 1

    @property
    def is_wednesday(self) -> bool:
        return self.weekday == 2

    @property
    def is_thursday(self) -> bool:
        return self.weekday == 3

    @property
    def is_friday(self) -> bool:
        return self.weekday == 4

    @property
    def is_saturday(self) -> bool:
        return self.weekday == 5

    @property
    def is_sunday(self) -> bool:
        return self.weekday == 6

    @property
    def is_weekday(self) -> bool:
        """Return True from Monday to Friday."""
        return not self.is_weekend

    @property
    def is_weekend(self) -> bool:
        """Return True on Saturday and Sunday."""
        return self.is_saturday or self.is_sunday

    @property
    def is_past(self) -> bool:
        return self.before(Date.today())

    @property
    def is_past_or_today(self) -> bool:
        return self.before_or_equal(Date.today())

    @property
    def is_future(self) -> bool:
        return self.after(Date.today())

    @property
    def is_future_or_today(self) -> bool:
        return self.after_or_equal(Date.today())

    @property
    def is_today(self) -> bool:
        return self.equal(Date.today())

    @property
    def is_yesterday(self) -> bool:
        return self.equal(Date.yesterday())

    @property
    def is_tomorrow(self) -> bool:
        return self.equal(Date.tomorrow())

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    # Comparison
    # --------------------------------------------------

    def _key(self) -> tuple[int, int]:
        # The zero Date orders before every real instant.
        if self._is_zero:
            return (0, 0)
        return (1, self._ordinal * SECONDS_PER_DAY - self.utc_offset)

    def compare(self, other: Date) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after ``other``."""
        left, right = self._key(), other._key()
        if left < right:
            return -1
        if left > right:
            return 1
        return 0

    def equal(self, other: Date) -> bool:
        return self._key() == other._key()

    def not_equal(self, other: Date) -> bool:
        return not self.equal(other)

    def after(self, other: Date) -> bool:
        return self._key() > other._key()

    def after_or_equal(self, other: Date) -> bool:
        return self.equal(other) or self.after(other)

    def before(self, other: Date) -> bool:
        return self._key() < other._key()

    def before_or_equal(self, other: Date) -> bool:
        return self.equal(other) or self.before(other)

    def between(self, start: Date, end: Date) -> bool:
        """Check whether this date lies in the inclusive range [start, end].

        Raises:
            DateRangeError: If ``start`` and ``end`` do not form a valid range.

        Examples:
            >>> utc = Timezone.utc()
            >>> Date(2024, 6, 5, utc).between(Date(2024, 6, 5, utc), Date(2024, 6, 6, utc))
            True
        """
        from caldate.core.date_range import DateRange

        return DateRange(start, end).contains(self)

    # Arithmetic
    # --------------------------------------------------

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Date:
        """Add to the calendar fields, then normalize any overflow.

        Unlike ``add_months``, this does not clamp to the end of the month:
        2024-01-31 plus one month is 2024-03-02, and 2024-02-29 plus one
        year is 2025-03-01.

        Raises:
            ValidationError: If the result is outside the supported years.
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        ordinal = normalize_to_ordinal(year + years, month + months, day + days)
        if self._is_zero and ordinal == self._ordinal:
            return self
        return Date._from_ordinal(ordinal, self._timezone)

    def add_day(self) -> Date:
        return self.add_days(1)

    def add_days(self, days: int) -> Date:
        return self.add_date(days=days)

    def sub_day(self) -> Date:
        return self.sub_days(1)

    def sub_days(self, days: int) -> Date:
        return self.add_days(-days)

    def add_week(self) -> Date:
        return self.add_weeks(1)

    def add_weeks(self, weeks: int) -> Date:
        return self.add_date(days=weeks * DAYS_PER_WEEK)

    def sub_week(self) -> Date:
        return self.sub_weeks(1)

    def sub_weeks(self, weeks: int) -> Date:
        return self.add_weeks(-weeks)

    def add_month(self) -> Date:
        return self.add_months(1)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the target month is shorter than this date's day number, the
        result is clamped to the last day of the target month instead of
        overflowing into the month after.

        Examples:
            >>> utc = Timezone.utc()
            >>> Date(2024, 1, 31, utc).add_months(1)
            Date(2024, 2, 29, timezone='UTC')
            >>> Date(2024, 3, 31, utc).add_months(-1)
            Date(2024, 2, 29, timezone='UTC')
        """
        if self._is_zero and months == 0:
            return self

        target = self.to_month().add_months(months)
        date = Date.normalize(target.year, target.month, self.day, self._timezone)

        if date.to_month() == target:
            return date

        # Overflowed into the following month: step back to the target's last day
        return date.sub_days(date.day)

    def sub_month(self) -> Date:
        return self.sub_months(1)

    def sub_months(self, months: int) -> Date:
        return self.add_months(-months)

    def add_year(self) -> Date:
        return self.add_years(1)

    def add_years(self, years: int) -> Date:
        return self.add_date(years=years)

    def sub_year(self) -> Date:
        return self.sub_years(1)

    def sub_years(self, years: int) -> Date:
        return self.add_years(-years)

    def start_of_month(self) -> Date:
        return Date(self.year, self.month, 1, self._timezone)

    def end_of_month(self) -> Date:
        return self.start_of_month().add_month().sub_day()

    def start_of_year(self) -> Date:
        return Date(self.year, 1, 1, self._timezone)

    def end_of_year(self) -> Date:
        return self.start_of_year().add_year().sub_day()

    # Conversion
    # --------------------------------------------------

    def to_month(self) -> Month:
        """Return the calendar month this date falls in."""
        from caldate.core.month import Month

        return Month(self.year, self.month)

    def nullable(self) -> NullDate:
        """Wrap this date in a present NullDate."""
        from caldate.core.null_date import NullDate

        return NullDate.of(self)

    def to_datetime(self) -> _datetime.datetime:
        """Return midnight of this day as an aware ``datetime``."""
        return self.at()

    def at(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> _datetime.datetime:
        """Return an aware ``datetime`` on this day at the given time.

        Raises:
            ValidationError: If the year is outside ``datetime``'s 1-9999
                range or a time component is invalid.

        Examples:
            >>> Date(2024, 6, 5, Timezone.utc()).at(13, 30)
            datetime.datetime(2024, 6, 5, 13, 30, tzinfo=datetime.timezone.utc)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        try:
            naive = _datetime.datetime(year, month, day, hour, minute, second, microsecond)
            return self._timezone.localize(naive)
        except (ValueError, OverflowError) as exc:
            raise ValidationError(f"cannot convert {self} to datetime: {exc}") from exc

    @property
    def year(self) -> int:
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> int:
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return month

    @property
    def day(self) -> int:
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    @property
    def year_day(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return days_before_month(year, month) + day

    @property
    def weekday(self) -> int:
        """Return the day of the week, Monday as 0 through Sunday as 6.

        Examples:
            >>> Date(2024, 6, 5, Timezone.utc()).weekday  # Wednesday
            2
        """
        return ordinal_to_weekday(self._ordinal)

    @property
    def timezone(self) -> Timezone:
        return self._timezone

    @property
    def utc_offset(self) -> int:
        """Return the UTC offset in seconds at midnight of this day.

        Examples:
            >>> berlin = Timezone.from_zone("Europe/Berlin")
            >>> Date(2024, 1, 10, berlin).utc_offset, Date(2024, 7, 10, berlin).utc_offset
            (3600, 7200)
        """
        return self._timezone.offset_on(*ordinal_to_ymd(self._ordinal))

    def iso_week(self) -> tuple[int, int]:
        """Return the ISO 8601 (year, week number).

        Examples:
            >>> Date(2024, 12, 30, Timezone.utc()).iso_week()
            (2025, 1)
        """
        return ordinal_to_iso_week(self._ordinal)

    def split(self) -> tuple[int, int, int]:
        """Return the (year, month, day) components."""
        return ordinal_to_ymd(self._ordinal)

    def format(self, layout: str) -> str:
        """Format this date with a strftime-style layout.

        Examples:
            >>> Date(2024, 6, 5, Timezone.utc()).format("%d/%m/%Y")
            '05/06/2024'
        """
        from caldate.format.strftime import strftime

        return strftime(self, layout)

    def to_iso_format(self) -> str:
        """Return the canonical YYYY-MM-DD form.

        Years before 0 get a leading minus sign (-YYYY-MM-DD).
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def to_json(self) -> str:
        """Return the JSON payload for this date (its canonical text)."""
        return self.to_iso_format()

    @classmethod
    def from_json(cls, data: object) -> Date:
        """Create a Date from a JSON string payload.

        Raises:
            ParseError: If the payload is not a canonical date string.
        """
        if not isinstance(data, str):
            raise ParseError(f"expected str for Date, got {type(data).__name__}")
        return cls.parse(data)

    # Operators
    # --------------------------------------------------

    def __add__(self, other: object) -> Date:
        """Add the whole days of a ``timedelta``."""
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other.days)

    @overload
    def __sub__(self, other: _datetime.timedelta) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> _datetime.timedelta: ...

    def __sub__(self, other: object) -> Date | _datetime.timedelta:
        """Subtract a ``timedelta`` or count the calendar days between dates.

        Examples:
            >>> utc = Timezone.utc()
            >>> Date(2024, 3, 1, utc) - Date(2024, 2, 1, utc)
            datetime.timedelta(days=29)
        """
        if isinstance(other, _datetime.timedelta):
            return self.add_days(-other.days)
        if isinstance(other, Date):
            return _datetime.timedelta(days=self._ordinal - other._ordinal)
        return NotImplemented  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after_or_equal(other)

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a string like ``Date(2024, 1, 15, timezone='UTC')``."""
        if self._is_zero:
            return "Date.zero()"
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"Date({year}, {month}, {day}, timezone={str(self._timezone)!r})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """The zero Date is falsy; every real date is truthy."""
        return not self._is_zero


__all__ = ["Date"]

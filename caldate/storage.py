"""Database value adapters for calendar values.

Dates are stored as canonical ``YYYY-MM-DD`` text, months as ``YYYY-MM``.
The plain functions convert between Caldate values and what a database
driver hands back; the SQLAlchemy column types wrap them for mapped tables:

    >>> from sqlalchemy import Column, Integer, MetaData, Table
    >>> from caldate.storage import DateType, NullDateType

    >>> bookings = Table(
    ...     "bookings",
    ...     MetaData(),
    ...     Column("id", Integer, primary_key=True),
    ...     Column("check_in", DateType()),
    ...     Column("cancelled_on", NullDateType(), nullable=True),
    ... )

The zero Date is stored as the empty string so that it reads back as the
zero Date rather than as 0001-01-01.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING

from sqlalchemy import String, TypeDecorator

from caldate.core.date import Date
from caldate.core.month import Month
from caldate.core.null_date import NullDate
from caldate.errors import ParseError, ScanError

if TYPE_CHECKING:
    from sqlalchemy import Dialect

log = logging.getLogger(__name__)


def date_to_db(date: Date) -> str:
    """Return the column value for ``date``."""
    if date.is_zero:
        return ""
    return str(date)


def date_from_db(value: object) -> Date:
    """Read a Date from a driver value.

    Accepts canonical text (``str`` or ``bytes``) and ``datetime`` /
    ``date`` moments. ``None`` and the empty string read as the zero Date.

    Raises:
        ScanError: If the value has an unsupported type, or is the zero
            ``datetime``.
        ParseError: If text is not a canonical date.
    """
    if value is None:
        return Date.zero()
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        if value == "":
            return Date.zero()
        try:
            return Date.parse(value)
        except ParseError:
            log.debug("Rejected stored date text %r", value)
            raise
    if isinstance(value, _datetime.datetime) and value.replace(tzinfo=None) == _datetime.datetime.min:
        log.debug("Rejected zero datetime %r", value)
        raise ScanError("value is the zero datetime")
    if isinstance(value, _datetime.date):
        return Date.from_datetime(value)
    log.debug("Rejected stored date of type %s", type(value).__name__)
    raise ScanError(f"cannot read a Date from {type(value).__name__}")


def null_date_to_db(value: NullDate) -> str | None:
    """Return the column value for ``value``; ``None`` when null."""
    if value.is_null:
        return None
    return date_to_db(value.take())


def null_date_from_db(value: object) -> NullDate:
    """Read a NullDate from a driver value.

    ``None`` and the empty string read as null.

    Raises:
        ScanError: If the value has an unsupported type.
        ParseError: If text is not a canonical date.
    """
    if value is None or value in ("", b""):
        return NullDate.null()
    return NullDate.of(date_from_db(value))


def month_to_db(month: Month) -> str:
    return str(month)


def month_from_db(value: object) -> Month:
    """Read a Month from ``YYYY-MM`` text; ``None`` and ``""`` read as the zero Month.

    Raises:
        ScanError: If the value has an unsupported type.
        ParseError: If text is not a canonical year-month.
    """
    if value is None:
        return Month.zero()
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return Month.zero() if value == "" else Month.parse(value)
    if isinstance(value, _datetime.date):
        return Month.from_datetime(value)
    log.debug("Rejected stored month of type %s", type(value).__name__)
    raise ScanError(f"cannot read a Month from {type(value).__name__}")


class DateType(TypeDecorator[Date]):
    impl = String(11)
    cache_ok = True

    def process_bind_param(self, value: Date | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return date_to_db(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Date | None:
        _ = dialect
        if value is None:
            return None
        return date_from_db(value)


class NullDateType(TypeDecorator[NullDate]):
    """A nullable date column surfaced as NullDate instead of ``None``."""

    impl = String(11)
    cache_ok = True

    def process_bind_param(self, value: NullDate | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return null_date_to_db(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> NullDate:
        _ = dialect
        return null_date_from_db(value)


class MonthType(TypeDecorator[Month]):
    impl = String(8)
    cache_ok = True

    def process_bind_param(self, value: Month | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return month_to_db(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Month | None:
        _ = dialect
        if value is None:
            return None
        return month_from_db(value)


__all__ = [
    "date_to_db",
    "date_from_db",
    "null_date_to_db",
    "null_date_from_db",
    "month_to_db",
    "month_from_db",
    "DateType",
    "NullDateType",
    "MonthType",
]

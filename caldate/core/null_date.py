"""NullDate: a Date that may be absent.

NullDate is the optional counterpart of Date for fields that may be
missing, such as a nullable database column or an optional JSON member.
Callers must explicitly unwrap it with ``take`` or ``take_or``.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from caldate._internal.constants import NULL_TOKEN
from caldate._internal.decorators import must
from caldate.core.date import Date
from caldate.errors import NullValueError, ParseError

T = TypeVar("T")


class NullDate:
    """An optional Date.

    Two NullDates are equal when both are null, or both are present with
    equal dates. A null and a present NullDate are never equal.

    Examples:
        >>> NullDate.null().take_or(Date.zero()).is_zero
        True
        >>> str(NullDate.null())
        'null'
        >>> NullDate.of(Date.parse("2024-06-05")).string_or_none()
        '2024-06-05'
    """

    __slots__ = ("_date",)

    def __init__(self, date: Date | None = None) -> None:
        self._date: Date | None = date

    @classmethod
    def of(cls, date: Date) -> NullDate:
        """Return a present NullDate holding ``date``."""
        return cls(date)

    @classmethod
    def null(cls) -> NullDate:
        """Return an absent NullDate."""
        return cls(None)

    @classmethod
    def from_optional(cls, date: Date | None) -> NullDate:
        return cls(date)

    @classmethod
    def from_text(cls, text: str) -> NullDate:
        """Parse canonical date text, or ``"null"`` for an absent value."""
        if text == NULL_TOKEN:
            return cls.null()
        return cls.of(Date.parse(text))

    # Determination
    # --------------------------------------------------

    @property
    def is_null(self) -> bool:
        return self._date is None

    @property
    def is_not_null(self) -> bool:
        return self._date is not None

    def equal(self, other: NullDate) -> bool:
        if self._date is None or other._date is None:
            return self._date is None and other._date is None
        return self._date.equal(other._date)

    def not_equal(self, other: NullDate) -> bool:
        return not self.equal(other)

    # Unwrapping
    # --------------------------------------------------

    def take(self) -> Date:
        """Return the held date.

        Raises:
            NullValueError: If this NullDate is null.
        """
        if self._date is None:
            raise NullValueError()
        return self._date

    @must
    def must_take(self) -> Date:
        return self.take()

    def take_or(self, default: Date) -> Date:
        return default if self._date is None else self._date

    def to_optional(self) -> Date | None:
        return self._date

    def string_or_none(self) -> str | None:
        return None if self._date is None else str(self._date)

    def if_some(self, fn: Callable[[Date], T]) -> T | None:
        """Call ``fn`` with the date when present and return its result.

        Exceptions raised by ``fn`` propagate to the caller.
        """
        if self._date is None:
            return None
        return fn(self._date)

    def if_none(self, fn: Callable[[], T]) -> T | None:
        """Call ``fn`` when null and return its result."""
        if self._date is not None:
            return None
        return fn()

    def map(self, fn: Callable[[Date], Date]) -> NullDate:
        """Apply ``fn`` to a present date; a null stays null."""
        if self._date is None:
            return self
        return NullDate.of(fn(self._date))

    # Serialization
    # --------------------------------------------------

    def to_json(self) -> str | None:
        return self.string_or_none()

    @classmethod
    def from_json(cls, data: object) -> NullDate:
        """Create a NullDate from a JSON string or null."""
        if data is None:
            return cls.null()
        if not isinstance(data, str):
            raise ParseError(f"expected str or None for NullDate, got {type(data).__name__}")
        return cls.of(Date.parse(data))

    # Operators
    # --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullDate):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((NullDate, self._date))

    def __repr__(self) -> str:
        if self._date is None:
            return "NullDate.null()"
        return f"NullDate({self._date!r})"

    def __str__(self) -> str:
        return NULL_TOKEN if self._date is None else str(self._date)

    def __bool__(self) -> bool:
        """A present NullDate is truthy, even when it holds the zero Date."""
        return self._date is not None


__all__ = ["NullDate"]

"""Caldate exception hierarchy.

All recoverable Caldate errors inherit from CaldateError. The one exception
is PreconditionViolation, raised by the ``must_*`` entry points, which is
an AssertionError so that handlers for recoverable errors never catch it.
"""

from __future__ import annotations


class CaldateError(Exception):
    """Base exception for all recoverable Caldate errors."""

    pass


class ValidationError(CaldateError):
    """Invalid input values.

    Raised when a calendar component is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Year outside -9999 to 9999
    """

    pass


class ParseError(CaldateError):
    """Failed to parse a string representation.

    Raised when text does not match the expected layout or names an
    impossible calendar date such as February 31.

    Attributes:
        text: The rejected input text.
        layout: The layout the text was parsed against.
    """

    def __init__(self, message: str, text: str | None = None, layout: str | None = None) -> None:
        super().__init__(message)
        self.text = text
        self.layout = layout


class DateRangeError(CaldateError):
    """A DateRange could not be constructed.

    Exactly one subclass is raised per failed construction, checked in
    this order: timezone mismatch, asymmetric zero, end before start.
    """

    pass


class TimezoneMismatchError(DateRangeError):
    """The start and end dates are bound to different locations."""

    def __init__(self, message: str = "the start date timezone and the end date timezone did not match") -> None:
        super().__init__(message)


class AsymmetricZeroError(DateRangeError):
    """Exactly one of the start and end dates is the zero Date."""

    def __init__(self, message: str = "only one side of the range cannot be zero") -> None:
        super().__init__(message)


class EndBeforeStartError(DateRangeError):
    """The end date is before the start date."""

    def __init__(self, message: str = "the end date is before the start date") -> None:
        super().__init__(message)


class MonthRangeError(CaldateError):
    """The end month is before the start month."""

    def __init__(self, message: str = "the end month is before the start month") -> None:
        super().__init__(message)


class RangesDoNotOverlapError(CaldateError):
    """An intersection was requested for ranges that do not overlap."""

    def __init__(self, message: str = "this range and the target range don't overlap") -> None:
        super().__init__(message)


class EmptyCollectionError(CaldateError):
    """A min/max style query was made on an empty collection."""

    pass


class NullValueError(CaldateError):
    """The value of an absent NullDate was requested."""

    def __init__(self, message: str = "NullDate is null") -> None:
        super().__init__(message)


class TimezoneError(CaldateError):
    """Invalid timezone.

    Examples:
        - Invalid UTC offset format
        - Offset outside valid range (-14h to +14h)
    """

    pass


class ScanError(CaldateError):
    """A storage value of an unsupported type was read."""

    pass


class ConfigurationError(CaldateError):
    """A configuration value is invalid."""

    pass


class PreconditionViolation(AssertionError):
    """A ``must_*`` entry point was called without its precondition.

    The original recoverable error is available as ``__cause__``.
    """

    pass


__all__ = [
    "CaldateError",
    "ValidationError",
    "ParseError",
    "DateRangeError",
    "TimezoneMismatchError",
    "AsymmetricZeroError",
    "EndBeforeStartError",
    "MonthRangeError",
    "RangesDoNotOverlapError",
    "EmptyCollectionError",
    "NullValueError",
    "TimezoneError",
    "ScanError",
    "ConfigurationError",
    "PreconditionViolation",
]

"""Custom decorators for Caldate.

This module provides decorator utilities for the library:
    - @must: Turn a fallible call into one that asserts its precondition

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, ParamSpec, TypeVar

from caldate.errors import CaldateError, PreconditionViolation

P = ParamSpec("P")
T = TypeVar("T")


def must(func: Callable[P, T]) -> Callable[P, T]:
    """Convert recoverable Caldate errors into PreconditionViolation.

    ``must_*`` entry points are for call sites that have already proven
    the precondition (a non-empty collection, well-formed text). If it
    does not hold after all, the failure is raised as an AssertionError
    subclass that ordinary ``except CaldateError`` handlers do not catch.

    Examples:
        >>> @must
        ... def must_parse(text: str) -> Date:
        ...     return Date.parse(text)

        >>> must_parse("nope")
        Traceback (most recent call last):
        ...
        PreconditionViolation: must_parse: failed to parse date 'nope' ...
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except CaldateError as exc:
            raise PreconditionViolation(f"{func.__name__}: {exc}") from exc

    return wrapper


__all__ = [
    "must",
]

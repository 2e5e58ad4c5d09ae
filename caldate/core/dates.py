"""Dates collection: an ordered list of Date values."""

from __future__ import annotations

import functools
from collections import Counter
from typing import Any, Callable

from caldate._internal.decorators import must
from caldate.core.date import Date
from caldate.core.sequence import ValueSequence
from caldate.errors import EmptyCollectionError


class Dates(ValueSequence[Date]):
    """A mutable, ordered list of Dates.

    Examples:
        >>> ds = Dates([Date.parse("2024-06-03"), Date.parse("2024-06-01")])
        >>> str(ds.min())
        '2024-06-01'
        >>> ds.sort().strings()
        ['2024-06-01', '2024-06-03']
    """

    __slots__ = ()

    def _sort_key(self) -> Callable[[Date], Any]:
        return functools.cmp_to_key(Date.compare)

    def min(self) -> Date:
        """Return the earliest date.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            raise EmptyCollectionError("cannot take the minimum of no dates")
        return self.sort()[0]

    def max(self) -> Date:
        """Return the latest date.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            raise EmptyCollectionError("cannot take the maximum of no dates")
        return self.sort_reverse()[0]

    @must
    def must_min(self) -> Date:
        return self.min()

    @must
    def must_max(self) -> Date:
        return self.max()

    def equal(self, other: Dates) -> bool:
        """Return True if both hold the same dates, ignoring order.

        Duplicates count: [a, a, b] is not equal to [a, b, b].
        """
        return Counter(self._items) == Counter(other._items)


__all__ = ["Dates"]

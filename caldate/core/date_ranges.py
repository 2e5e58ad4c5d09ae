"""DateRanges collection: an ordered list of DateRange values."""

from __future__ import annotations

import functools
from typing import Any, Callable

from caldate._internal.decorators import must
from caldate.core.date import Date
from caldate.core.date_range import DateRange
from caldate.core.dates import Dates
from caldate.core.sequence import ValueSequence


def _compare_ranges(left: DateRange, right: DateRange) -> int:
    if left.less_than(right):
        return -1
    if right.less_than(left):
        return 1
    return 0


class DateRanges(ValueSequence[DateRange]):
    """A mutable, ordered list of DateRanges, sorted by start then end.

    Examples:
        >>> rs = DateRanges([
        ...     DateRange.parse("2024-06-10", "2024-06-12"),
        ...     DateRange.parse("2024-06-01", "2024-06-11"),
        ... ])
        >>> rs.are_overlapping()
        True
        >>> str(rs.first_start())
        '2024-06-01'
    """

    __slots__ = ()

    def _sort_key(self) -> Callable[[DateRange], Any]:
        return functools.cmp_to_key(_compare_ranges)

    def are_overlapping(self) -> bool:
        """Return True if any two ranges in the collection overlap."""
        for i, left in enumerate(self._items):
            for right in self._items[i + 1:]:
                if left.overlaps_with(right):
                    return True
        return False

    def start_dates(self) -> Dates:
        """Return the start of every range, in collection order."""
        return Dates(r.start for r in self._items)

    def end_dates(self) -> Dates:
        """Return the end of every range, in collection order."""
        return Dates(r.end for r in self._items)

    def first_start(self) -> Date:
        """Return the earliest start date.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        return self.start_dates().min()

    def last_end(self) -> Date:
        """Return the latest end date.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        return self.end_dates().max()

    @must
    def must_first_start(self) -> Date:
        return self.first_start()

    @must
    def must_last_end(self) -> Date:
        return self.last_end()


__all__ = ["DateRanges"]

"""Mutable ordered collection shared by Dates and DateRanges.

This module is not part of the public API; use Dates or DateRanges.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any, Callable, Generic, TypeVar, overload

T = TypeVar("T")
S = TypeVar("S", bound="ValueSequence[Any]")


class ValueSequence(MutableSequence[T], Generic[T]):
    """A list of value objects with copy-then-sort helpers.

    Subclasses supply ``_sort_key``; the plain ``sort`` and ``sort_reverse``
    return sorted copies while the ``*_mutable`` variants reorder in place.
    Equality is order-sensitive and also holds against a plain list.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    @abstractmethod
    def _sort_key(self) -> Callable[[T], Any]:
        """Return the key used by the sorting helpers."""

    # MutableSequence protocol
    # --------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self: S, index: slice) -> S: ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._items[index] = value

    def __delitem__(self, index: Any) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    # Ordering
    # --------------------------------------------------

    def clone(self: S) -> S:
        """Return a shallow copy; the elements are immutable values."""
        return type(self)(self._items)

    def sort_mutable(self: S) -> S:
        """Sort ascending in place and return self."""
        self._items.sort(key=self._sort_key())
        return self

    def sort_reverse_mutable(self: S) -> S:
        """Sort descending in place and return self."""
        self._items.sort(key=self._sort_key(), reverse=True)
        return self

    def sort(self: S) -> S:
        """Return an ascending copy, leaving this collection untouched."""
        return self.clone().sort_mutable()

    def sort_reverse(self: S) -> S:
        """Return a descending copy, leaving this collection untouched."""
        return self.clone().sort_reverse_mutable()

    def are_unique(self) -> bool:
        """Return True if no two elements are equal."""
        for i, left in enumerate(self._items):
            for right in self._items[i + 1:]:
                if left == right:
                    return False
        return True

    def strings(self) -> list[str]:
        """Return the text form of every element, in order."""
        return [str(item) for item in self._items]

    # Operators
    # --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueSequence):
            return type(other) is type(self) and self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


__all__ = ["ValueSequence"]

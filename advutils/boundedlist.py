"""Linked-style list with a fixed maximum number of items."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from advutils.errors import EmptyError, FullError


class BoundedList:
    """An ordered sequence that holds at most ``capacity`` items.

    Adding to a full list raises :class:`FullError`. Reading or removing from
    an empty list raises :class:`EmptyError`. A position outside the list
    raises :class:`IndexError`.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Maximum number of items the list can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedList(capacity={self._capacity}, items={self._items!r})"

    def _ensure_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise FullError("list is full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise EmptyError("list is empty")

    def _check_position(self, position: int, limit: int) -> None:
        if not 0 <= position < limit:
            raise IndexError(f"position {position} is out of range")

    def push(self, value: Any) -> None:
        """Append a value at the end."""
        self._ensure_room()
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        """Insert a value at the beginning."""
        self._ensure_room()
        self._items.insert(0, value)

    def insert(self, value: Any, position: int) -> None:
        """Insert a value so that it ends up at ``position``."""
        self._ensure_room()
        self._check_position(position, len(self._items) + 1)
        self._items.insert(position, value)

    def update(self, value: Any, position: int) -> None:
        """Replace the value stored at ``position``."""
        self._check_position(position, len(self._items))
        self._items[position] = value

    def pop(self) -> Any:
        """Remove and return the first value."""
        self._ensure_items()
        return self._items.pop(0)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        self._ensure_items()
        return self._items.pop()

    def remove(self, position: int) -> Any:
        """Remove and return the value at ``position``."""
        self._ensure_items()
        self._check_position(position, len(self._items))
        return self._items.pop(position)

    def peek(self) -> Any:
        """Return the first value without removing it."""
        self._ensure_items()
        return self._items[0]

    def peek_back(self) -> Any:
        """Return the last value without removing it."""
        self._ensure_items()
        return self._items[-1]

    def peek_at(self, position: int) -> Any:
        """Return the value at ``position`` without removing it."""
        self._ensure_items()
        self._check_position(position, len(self._items))
        return self._items[position]

    def flush(self) -> None:
        """Remove every value; raise :class:`EmptyError` if already empty."""
        self._ensure_items()
        self._items.clear()
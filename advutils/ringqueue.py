"""Fixed-capacity double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

from advutils.errors import EmptyError, FullError


class RingQueue:
    """A queue of bounded capacity that can be fed and drained at both ends.

    Single-item operations raise :class:`FullError` or :class:`EmptyError`.
    Bulk operations are all-or-nothing: they raise before changing the queue
    when it cannot take or supply every requested item.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        """Maximum number of items the queue can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RingQueue(capacity={self._capacity}, items={list(self._items)!r})"

    def _free(self) -> int:
        return self._capacity - len(self._items)

    def push(self, value: Any) -> None:
        """Append a value at the rear."""
        if not self._free():
            raise FullError("queue is full")
        self._items.append(value)

    def push_many(self, values: Iterable[Any]) -> None:
        """Append several values at the rear, keeping their order."""
        batch = list(values)
        if len(batch) > self._free():
            raise FullError(f"queue cannot hold {len(batch)} more items")
        self._items.extend(batch)

    def push_front(self, value: Any) -> None:
        """Insert a value at the front."""
        if not self._free():
            raise FullError("queue is full")
        self._items.appendleft(value)

    def push_front_many(self, values: Iterable[Any]) -> None:
        """Insert several values at the front; the first one becomes the new front."""
        batch = list(values)
        if len(batch) > self._free():
            raise FullError(f"queue cannot hold {len(batch)} more items")
        self._items.extendleft(reversed(batch))

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items.popleft()

    def pop_many(self, count: int) -> list[Any]:
        """Remove and return ``count`` values from the front, in queue order."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self._items):
            raise EmptyError(f"queue holds fewer than {count} items")
        return [self._items.popleft() for _ in range(count)]

    def pop_back(self) -> Any:
        """Remove and return the rear value."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items.pop()

    def pop_back_many(self, count: int) -> list[Any]:
        """Remove and return the last ``count`` values, in queue order."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self._items):
            raise EmptyError(f"queue holds fewer than {count} items")
        taken = [self._items.pop() for _ in range(count)]
        taken.reverse()
        return taken

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items[0]

    def peek_back(self) -> Any:
        """Return the rear value without removing it."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items[-1]

    def flush(self) -> None:
        """Remove every value."""
        self._items.clear()
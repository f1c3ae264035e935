"""FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class LinkQueue:
    """An unbounded first-in, first-out queue."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.popleft()

    def head(self) -> Any:
        """Return the front element without removing it."""
        if not self._items:
            raise QueueEmptyError("head of an empty queue")
        return self._items[0]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
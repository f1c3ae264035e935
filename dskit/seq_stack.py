"""Array-backed LIFO stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class SeqStack:
    """A last-in, first-out stack; iteration runs from bottom to top."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("top of an empty stack")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
"""Singly linked list with a sentinel head node and 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list addressed by 1-based positions."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        self._size = 0
        tail = self._head
        for value in items:
            tail.next = _Node(value)
            tail = tail.next
            self._size += 1

    def _node_at(self, position: int) -> _Node:
        """Return the node at ``position``; position 0 is the sentinel."""
        node = self._head
        for _ in range(position):
            assert node.next is not None
            node = node.next
        return node

    def get(self, position: int) -> Any:
        """Return the element at ``position`` (1-based)."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        return self._node_at(position).value

    def locate(self, value: Any) -> int:
        """Return the 1-based position of the first element equal to ``value``."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` before the element at ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        before = self._node_at(position - 1)
        before.next = _Node(value, before.next)
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the element at ``position`` and return it."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        before = self._node_at(position - 1)
        removed = before.next
        assert removed is not None
        before.next = removed.next
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def from_head_insertion(values: Iterable[Any]) -> LinkedList:
    """Build a list by inserting each value at the front (reverses the input)."""
    result = LinkedList()
    for value in values:
        result.insert(1, value)
    return result


def from_tail_insertion(values: Iterable[Any]) -> LinkedList:
    """Build a list by appending each value at the end (keeps the input order)."""
    return LinkedList(values)
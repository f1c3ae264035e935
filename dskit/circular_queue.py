"""Bounded circular queue that keeps one slot free to tell full from empty."""

from __future__ import annotations

from typing import Any

from dskit.link_queue import QueueEmptyError

MAX_QUEUE_SIZE = 100


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class CircularQueue:
    """A ring buffer holding at most ``capacity - 1`` elements."""

    def __init__(self, capacity: int = MAX_QUEUE_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        following = (self._rear + 1) % self.capacity
        if following == self._front:
            raise QueueFullError("queue is full")
        self._slots[self._rear] = value
        self._rear = following

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        return value

    def is_empty(self) -> bool:
        return self._front == self._rear

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity
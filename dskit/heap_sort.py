"""Heap sort built on a max-heap sift-down."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def heap_adjust(heap: MutableSequence[Any], start: int, end: int) -> None:
    """Sift the element at ``start`` down so that ``heap[start:end]`` is a max-heap.

    Indices are 0-based and ``end`` is exclusive. Every subtree below ``start``
    must already satisfy the heap property.
    """
    if start < 0 or end > len(heap):
        raise IndexError(f"heap range [{start}, {end}) outside a heap of {len(heap)}")
    if start >= end:
        return
    item = heap[start]
    hole = start
    child = 2 * hole + 1
    while child < end:
        if child + 1 < end and heap[child] < heap[child + 1]:
            child += 1
        if not item < heap[child]:
            break
        heap[hole] = heap[child]
        hole = child
        child = 2 * hole + 1
    heap[hole] = item


def heap_sort(keys: Iterable[Any]) -> list[Any]:
    """Return the keys in ascending order, sorted with a max-heap."""
    heap = list(keys)
    size = len(heap)
    for start in range(size // 2 - 1, -1, -1):
        heap_adjust(heap, start, size)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        heap_adjust(heap, 0, end)
    return heap
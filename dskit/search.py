"""Sequential and binary search over tables addressed from position 1.

Every function returns the 1-based position of a matching key, or 0 when the
key is absent.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sequential_search(table: Sequence[Any], key: Any) -> int:
    """Scan from the last element backwards; returns the last matching position."""
    position = len(table)
    while position > 0 and table[position - 1] != key:
        position -= 1
    return position


def sequential_search_sentinel(table: Sequence[Any], key: Any) -> int:
    """Backward scan that stops on a copy of ``key`` placed at position 0."""
    slots = [key, *table]
    position = len(table)
    while slots[position] != key:
        position -= 1
    return position


def binary_search(table: Sequence[Any], key: Any) -> int:
    """Iterative binary search of an ascending table."""
    low, high = 1, len(table)
    while low <= high:
        mid = (low + high) // 2
        value = table[mid - 1]
        if value == key:
            return mid
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return 0


def binary_search_recursive(table: Sequence[Any], low: int, high: int, key: Any) -> int:
    """Recursive binary search of positions ``low`` to ``high`` of an ascending table."""
    if low > high:
        return 0
    if low < 1 or high > len(table):
        raise IndexError(f"positions {low}..{high} outside a table of {len(table)}")
    mid = (low + high) // 2
    value = table[mid - 1]
    if value > key:
        return binary_search_recursive(table, low, mid - 1, key)
    if value < key:
        return binary_search_recursive(table, mid + 1, high, key)
    return mid
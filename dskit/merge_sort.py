"""Top-down merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences; on equal keys the left one comes first."""
    result: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(keys: Iterable[Any]) -> list[Any]:
    """Return the keys in ascending order; the left half takes the middle element."""
    items = list(keys)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))
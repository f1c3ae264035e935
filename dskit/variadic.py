"""Maximum over a variable number of arguments."""

from __future__ import annotations


def max_of(*args: int) -> int:
    """Return the largest argument, never less than 0 (0 when none are given)."""
    return max((0, *args))
"""The Josephus elimination problem."""

from __future__ import annotations

from collections import deque


def josephus(n: int, m: int) -> tuple[list[int], int]:
    """Seat people 1..n in a circle and remove every m-th one.

    Returns the elimination order and the last person left.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if m < 1:
        raise ValueError("m must be at least 1")
    circle = deque(range(1, n + 1))
    eliminated = []
    while len(circle) > 1:
        circle.rotate(-(m - 1))
        eliminated.append(circle.popleft())
    return eliminated, circle[0]
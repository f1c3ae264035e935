"""Towers of Hanoi."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


def hanoi_moves(
    n: int, source: str = "x", auxiliary: str = "y", target: str = "z"
) -> Iterator[tuple[int, str, str]]:
    """Yield (disk, from_peg, to_peg) moves that carry n disks from source to target."""
    if n < 1:
        raise ValueError("n must be at least 1")

    def solve(count: int, src: str, aux: str, dst: str) -> Iterator[tuple[int, str, str]]:
        if count == 1:
            yield (1, src, dst)
            return
        yield from solve(count - 1, src, dst, aux)
        yield (count, src, dst)
        yield from solve(count - 1, aux, src, dst)

    return solve(n, source, auxiliary, target)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the moves for the Towers of Hanoi.")
    parser.add_argument("disks", nargs="?", type=int, help="number of disks")
    args = parser.parse_args(argv)
    disks = args.disks
    if disks is None:
        disks = int(input("Number of disks: "))
    try:
        moves = hanoi_moves(disks)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for disk, src, dst in moves:
        print(f"Disk {disk}: {src} --> {dst}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
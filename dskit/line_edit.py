"""Line editor: '#' erases the previous character, '@' erases the whole line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from dskit.seq_stack import SeqStack

ERASE_CHAR = "#"
KILL_LINE = "@"


def edit_line(line: str) -> str:
    """Apply erase and kill characters to one line of input."""
    stack = SeqStack()
    for ch in line:
        if ch == ERASE_CHAR:
            if not stack.is_empty():
                stack.pop()
        elif ch == KILL_LINE:
            stack.clear()
        else:
            stack.push(ch)
    return "".join(stack)


def edit_lines(lines: Iterable[str]) -> Iterator[str]:
    """Edit each line, ignoring its trailing newline."""
    for line in lines:
        yield edit_line(line.rstrip("\n"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Edit lines: '#' erases a character, '@' erases the line."
    )
    parser.add_argument("file", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as stream:
            for edited in edit_lines(stream):
                print(edited)
    else:
        for edited in edit_lines(sys.stdin):
            print(edited)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Bounded-length strings with 1-based positions, naive and KMP pattern search."""

from __future__ import annotations

from typing import Union

MAX_LENGTH = 255

_Text = Union[str, "SString"]


def get_next(pattern: _Text) -> list[int]:
    """Return the KMP failure values of ``pattern``.

    Element ``k - 1`` of the result is the value for 1-based position ``k``;
    the first value is always 0.
    """
    text = str(pattern)
    failure = [0] * (len(text) + 1)
    i, j = 1, 0
    while i < len(text):
        if j == 0 or text[i - 1] == text[j - 1]:
            i += 1
            j += 1
            failure[i] = j
        else:
            j = failure[j]
    return failure[1:]


class SString:
    """A mutable string of at most ``MAX_LENGTH`` characters, addressed from 1."""

    def __init__(self, chars: _Text = "") -> None:
        text = str(chars)
        if len(text) > MAX_LENGTH:
            raise ValueError(f"string longer than {MAX_LENGTH} characters")
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SString, str)):
            return self._text == str(other)
        return NotImplemented

    def substring(self, pos: int, length: int) -> SString:
        """Return ``length`` characters starting at position ``pos``."""
        size = len(self._text)
        if pos < 1 or pos > size or length < 0 or length > size - pos + 1:
            raise IndexError(f"substring({pos}, {length}) out of range")
        return SString(self._text[pos - 1 : pos - 1 + length])

    def index(self, pattern: _Text, pos: int = 1) -> int:
        """Position of ``pattern`` at or after ``pos`` by naive matching; 0 if absent."""
        text, target = self._text, str(pattern)
        if not 1 <= pos <= len(text):
            return 0
        i, j = pos, 1
        while i <= len(text) and j <= len(target):
            if text[i - 1] == target[j - 1]:
                i += 1
                j += 1
            else:
                i = i - j + 2
                j = 1
        return i - len(target) if j > len(target) else 0

    def index_kmp(self, pattern: _Text, pos: int = 1) -> int:
        """Position of ``pattern`` at or after ``pos`` by KMP matching; 0 if absent."""
        text, target = self._text, str(pattern)
        if not 1 <= pos <= len(text):
            return 0
        failure = [0, *get_next(target)]
        i, j = pos, 1
        while i <= len(text) and j <= len(target):
            if j == 0 or text[i - 1] == target[j - 1]:
                i += 1
                j += 1
            else:
                j = failure[j]
        return i - len(target) if j > len(target) else 0

    def replace(self, old: _Text, new: _Text) -> int:
        """Replace every non-overlapping ``old`` with ``new``; return the count."""
        old_s, new_s = SString(old), SString(new)
        if old_s.is_empty():
            raise ValueError("pattern to replace must not be empty")
        count = 0
        pos = 1
        while True:
            pos = self.index(old_s, pos)
            if not pos:
                return count
            self.delete(pos, len(old_s))
            self.insert(pos, new_s)
            pos += len(new_s)
            count += 1

    def compare(self, other: _Text) -> int:
        """Positive, zero or negative as this string is greater, equal or less."""
        target = str(other)
        for mine, theirs in zip(self._text, target):
            if mine != theirs:
                return ord(mine) - ord(theirs)
        return len(self._text) - len(target)

    def insert(self, pos: int, other: _Text) -> bool:
        """Insert ``other`` before position ``pos``.

        Returns True when all of it fit, False when the result was truncated.
        """
        if pos < 1 or pos > len(self._text) + 1:
            raise IndexError(f"insert position {pos} out of range")
        combined = self._text[: pos - 1] + str(other) + self._text[pos - 1 :]
        self._text = combined[:MAX_LENGTH]
        return len(combined) <= MAX_LENGTH

    def delete(self, pos: int, length: int) -> None:
        """Remove ``length`` characters starting at position ``pos``."""
        if length < 0 or pos < 1 or pos > len(self._text) - length + 1:
            raise IndexError(f"delete({pos}, {length}) out of range")
        self._text = self._text[: pos - 1] + self._text[pos - 1 + length :]

    def concat(self, other: _Text) -> SString:
        """Return this string followed by ``other``, truncated to ``MAX_LENGTH``."""
        return SString((self._text + str(other))[:MAX_LENGTH])

    def clear(self) -> None:
        self._text = ""

    def is_empty(self) -> bool:
        return not self._text
"""Sparse matrices stored as row-major lists of (row, column, value) triples."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

MAX_TERMS = 10000


@dataclass(frozen=True)
class Triple:
    """One non-zero entry; rows and columns count from 1."""

    row: int
    col: int
    value: int


class SparseMatrix:
    """An immutable sparse matrix whose triples are kept in row-major order."""

    def __init__(
        self,
        rows: int,
        cols: int,
        triples: Iterable[Union[Triple, tuple[int, int, int]]] = (),
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        items = tuple(t if isinstance(t, Triple) else Triple(*t) for t in triples)
        if len(items) > MAX_TERMS:
            raise ValueError(f"more than {MAX_TERMS} non-zero entries")
        for t in items:
            if not (1 <= t.row <= rows and 1 <= t.col <= cols):
                raise ValueError(f"entry {t} outside a {rows}x{cols} matrix")
        self.rows = rows
        self.cols = cols
        self.triples = items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.rows, self.cols, self.triples) == (other.rows, other.cols, other.triples)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}, {self.cols}, {list(self.triples)!r})"

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return ``self + other``; entries that cancel to zero are dropped."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrices must have the same shape")
        a, b = self.triples, other.triples
        result: list[Triple] = []
        ia = ib = 0
        while ia < len(a) and ib < len(b):
            x, y = a[ia], b[ib]
            kx, ky = (x.row, x.col), (y.row, y.col)
            if kx < ky:
                result.append(x)
                ia += 1
            elif kx > ky:
                result.append(y)
                ib += 1
            else:
                total = x.value + y.value
                if total:
                    result.append(Triple(x.row, x.col, total))
                ia += 1
                ib += 1
        result.extend(a[ia:])
        result.extend(b[ib:])
        return SparseMatrix(self.rows, self.cols, result)

    def subtract(self, other: SparseMatrix) -> SparseMatrix:
        """Return ``self - other``."""
        negated = SparseMatrix(
            other.rows, other.cols, (Triple(t.row, t.col, -t.value) for t in other.triples)
        )
        return self.add(negated)

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Return the matrix product ``self * other``."""
        if self.cols != other.rows:
            raise ValueError("column count of the left matrix must equal row count of the right")
        sums: defaultdict[tuple[int, int], int] = defaultdict(int)
        for x in self.triples:
            for y in other.triples:
                if x.col == y.row:
                    sums[(x.row, y.col)] += x.value * y.value
        triples = [Triple(r, c, v) for (r, c), v in sorted(sums.items()) if v]
        return SparseMatrix(self.rows, other.cols, triples)

    def transpose(self) -> SparseMatrix:
        """Transpose by scanning the triples once per column."""
        triples = [
            Triple(t.col, t.row, t.value)
            for col in range(1, self.cols + 1)
            for t in self.triples
            if t.col == col
        ]
        return SparseMatrix(self.cols, self.rows, triples)

    def fast_transpose(self) -> SparseMatrix:
        """Transpose in one pass using per-column counts and start positions."""
        counts = Counter(t.col for t in self.triples)
        starts: dict[int, int] = {}
        position = 0
        for col in range(1, self.cols + 1):
            starts[col] = position
            position += counts[col]
        placed: list[Triple | None] = [None] * len(self.triples)
        for t in self.triples:
            placed[starts[t.col]] = Triple(t.col, t.row, t.value)
            starts[t.col] += 1
        return SparseMatrix(self.cols, self.rows, (t for t in placed if t is not None))

    def format(self) -> str:
        """Render the matrix as a header and one line per triple."""
        lines = [
            f"{self.rows} rows, {self.cols} columns, {len(self.triples)} non-zero entries",
            "row col   value",
        ]
        lines.extend(f"{t.row:2}{t.col:4}{t.value:8}" for t in self.triples)
        return "\n".join(lines)
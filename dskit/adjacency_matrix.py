"""Undirected weighted graphs stored as adjacency matrices."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

INFINITY = math.inf


class AdjacencyMatrixGraph:
    """An undirected network; absent edges have weight ``INFINITY``.

    Vertices are addressed by their 0-based index in ``vertices``; each edge
    is ``(u, v, weight)`` in terms of vertex values.
    """

    def __init__(
        self, vertices: Iterable[Hashable], edges: Iterable[Sequence[Any]] = ()
    ) -> None:
        self.vertices = tuple(vertices)
        if len(set(self.vertices)) != len(self.vertices):
            raise ValueError("vertices must be distinct")
        n = len(self.vertices)
        self._matrix: list[list[Any]] = [[INFINITY] * n for _ in range(n)]
        self.edge_count = 0
        for edge in edges:
            if len(edge) != 3:
                raise ValueError(f"edge {edge!r} must be (u, v, weight)")
            u, v, weight = edge
            i, j = self.locate(u), self.locate(v)
            self._matrix[i][j] = weight
            self._matrix[j][i] = weight
            self.edge_count += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.vertices)!r}, edges={self.edge_count})"

    def locate(self, vertex: Hashable) -> int:
        """Return the index of ``vertex``."""
        try:
            return self.vertices.index(vertex)
        except ValueError:
            raise ValueError(f"unknown vertex {vertex!r}") from None

    def weight(self, u: int, v: int) -> Any:
        """Weight of the edge between indices ``u`` and ``v``, or ``INFINITY``."""
        return self._matrix[u][v]

    def neighbors(self, index: int) -> list[int]:
        """Indices adjacent to ``index``, in increasing order."""
        return [j for j, w in enumerate(self._matrix[index]) if w != INFINITY]

    def dfs(self) -> list[Hashable]:
        """Vertices in depth-first order, restarting at each unvisited vertex."""
        visited = [False] * len(self.vertices)
        order: list[Hashable] = []
        for start in range(len(self.vertices)):
            if visited[start]:
                continue
            visited[start] = True
            order.append(self.vertices[start])
            pending = [iter(self.neighbors(start))]
            while pending:
                for w in pending[-1]:
                    if not visited[w]:
                        visited[w] = True
                        order.append(self.vertices[w])
                        pending.append(iter(self.neighbors(w)))
                        break
                else:
                    pending.pop()
        return order
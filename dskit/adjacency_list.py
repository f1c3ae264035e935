"""Graphs stored as adjacency lists, with depth- and breadth-first traversal."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from dskit.link_queue import LinkQueue


@dataclass(frozen=True)
class Arc:
    """An arc to the vertex at index ``target``, with an optional weight."""

    target: int
    weight: Optional[Any] = None


class AdjacencyListGraph:
    """A directed or undirected graph whose arcs keep the order they were given in.

    Vertices are addressed by their 0-based index in ``vertices``. Each edge is
    ``(u, v)`` or ``(u, v, weight)`` in terms of vertex values.
    """

    def __init__(
        self,
        vertices: Iterable[Hashable],
        edges: Iterable[Sequence[Any]] = (),
        directed: bool = False,
    ) -> None:
        self.vertices = tuple(vertices)
        if len(set(self.vertices)) != len(self.vertices):
            raise ValueError("vertices must be distinct")
        self.directed = directed
        self._arcs: list[list[Arc]] = [[] for _ in self.vertices]
        self.arc_count = 0
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                weight = None
            elif len(edge) == 3:
                u, v, weight = edge
            else:
                raise ValueError(f"edge {edge!r} must have two or three items")
            i, j = self.locate(u), self.locate(v)
            self._arcs[i].append(Arc(j, weight))
            if not directed:
                self._arcs[j].append(Arc(i, weight))
            self.arc_count += 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self.vertices)!r}, "
            f"arcs={self.arc_count}, directed={self.directed})"
        )

    def locate(self, vertex: Hashable) -> int:
        """Return the index of ``vertex``."""
        try:
            return self.vertices.index(vertex)
        except ValueError:
            raise ValueError(f"unknown vertex {vertex!r}") from None

    def arcs(self, index: int) -> tuple[Arc, ...]:
        """The arcs leaving the vertex at ``index``, in insertion order."""
        return tuple(self._arcs[index])

    def neighbors(self, index: int) -> list[int]:
        """Indices of the vertices reached from ``index``, in arc order."""
        return [arc.target for arc in self._arcs[index]]

    def in_degrees(self) -> list[int]:
        """Number of arcs entering each vertex, by index."""
        degrees = [0] * len(self.vertices)
        for arcs in self._arcs:
            for arc in arcs:
                degrees[arc.target] += 1
        return degrees

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

    def bfs(self) -> list[Hashable]:
        """Vertices in breadth-first order, restarting at each unvisited vertex."""
        visited = [False] * len(self.vertices)
        order: list[Hashable] = []
        queue = LinkQueue()
        for start in range(len(self.vertices)):
            if visited[start]:
                continue
            visited[start] = True
            order.append(self.vertices[start])
            queue.enqueue(start)
            while not queue.is_empty():
                u = queue.dequeue()
                for w in self.neighbors(u):
                    if not visited[w]:
                        visited[w] = True
                        order.append(self.vertices[w])
                        queue.enqueue(w)
        return order
"""Topological sorting of adjacency-list graphs, with earliest event times."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Optional

from dskit.adjacency_list import AdjacencyListGraph
from dskit.seq_stack import SeqStack


class CycleError(ValueError):
    """Raised when a graph has a cycle and so no topological order."""


def _kahn(graph: AdjacencyListGraph, earliest: Optional[list[Any]] = None) -> list[int]:
    """Indices in topological order, taking zero in-degree vertices from a stack.

    When ``earliest`` is given it is filled with the earliest time of each event.
    """
    indegree = graph.in_degrees()
    stack = SeqStack(i for i, d in enumerate(indegree) if d == 0)
    order: list[int] = []
    while not stack.is_empty():
        j = stack.pop()
        order.append(j)
        for arc in graph.arcs(j):
            k = arc.target
            indegree[k] -= 1
            if indegree[k] == 0:
                stack.push(k)
            if earliest is not None and earliest[j] + arc.weight > earliest[k]:
                earliest[k] = earliest[j] + arc.weight
    if len(order) < len(graph.vertices):
        raise CycleError("graph has a cycle")
    return order


def topological_sort(graph: AdjacencyListGraph) -> list[Hashable]:
    """Vertex values in a topological order."""
    return [graph.vertices[i] for i in _kahn(graph)]


def topological_order(graph: AdjacencyListGraph) -> tuple[list[int], list[Any]]:
    """Return (indices in topological order, earliest time of each vertex by index).

    Every arc must carry a weight, its duration.
    """
    for index in range(len(graph.vertices)):
        for arc in graph.arcs(index):
            if arc.weight is None:
                raise ValueError(f"arc from {graph.vertices[index]!r} has no duration")
    earliest: list[Any] = [0] * len(graph.vertices)
    order = _kahn(graph, earliest)
    return order, earliest
"""Critical activities of an activity-on-edge network."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from dskit.adjacency_list import AdjacencyListGraph
from dskit.topological import topological_order


@dataclass(frozen=True)
class Activity:
    """One arc of the network with its earliest and latest start times."""

    tail: Hashable
    head: Hashable
    duration: Any
    earliest: Any
    latest: Any

    @property
    def slack(self) -> Any:
        return self.latest - self.earliest

    @property
    def critical(self) -> bool:
        return self.earliest == self.latest


def critical_path(graph: AdjacencyListGraph) -> list[Activity]:
    """Every activity with its start times, listed by tail vertex then arc order.

    Raises ``CycleError`` when the network has a cycle.
    """
    order, earliest = topological_order(graph)
    length = max(earliest, default=0)
    latest = [length] * len(graph.vertices)
    for j in reversed(order):
        for arc in graph.arcs(j):
            if latest[arc.target] - arc.weight < latest[j]:
                latest[j] = latest[arc.target] - arc.weight
    return [
        Activity(
            graph.vertices[j],
            graph.vertices[arc.target],
            arc.weight,
            earliest[j],
            latest[arc.target] - arc.weight,
        )
        for j in range(len(graph.vertices))
        for arc in graph.arcs(j)
    ]
"""Prim's minimum spanning tree on an adjacency-matrix network."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from dskit.adjacency_matrix import INFINITY, AdjacencyMatrixGraph


def minimum_spanning_tree(
    graph: AdjacencyMatrixGraph, start: Hashable
) -> list[tuple[Hashable, Hashable, Any]]:
    """Return the tree's edges as (tree vertex, new vertex, weight) in the order added.

    Ties go to the vertex with the lowest index.
    """
    n = len(graph.vertices)
    k = graph.locate(start)
    in_tree = [False] * n
    in_tree[k] = True
    nearest = [start] * n
    lowcost = [graph.weight(k, j) for j in range(n)]
    edges = []
    for _ in range(n - 1):
        candidates = [j for j in range(n) if not in_tree[j]]
        k = min(candidates, key=lambda j: lowcost[j])
        if lowcost[k] == INFINITY:
            raise ValueError("graph is not connected")
        edges.append((nearest[k], graph.vertices[k], lowcost[k]))
        in_tree[k] = True
        for j in candidates:
            if not in_tree[j] and graph.weight(k, j) < lowcost[j]:
                lowcost[j] = graph.weight(k, j)
                nearest[j] = graph.vertices[k]
    return edges
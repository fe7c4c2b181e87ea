"""Exceptions raised by graphsearch algorithms.

Generic conditions use built-in exceptions (``KeyError`` for unknown queue
entries, ``IndexError`` for popping an empty queue, ``RuntimeError`` for broken
internal invariants). The classes below cover outcomes that callers are
expected to handle explicitly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from graphsearch.graph.base import Node


class NegativeEdgeWeightError(ValueError):
    """Raised when a shortest-path search relaxes an edge with negative cost.

    Dijkstra and A* settle nodes in order of distance; a negative edge breaks
    that order and would silently produce wrong distances, so the search stops
    at the first one it meets.

    Attributes:
        src: Tail node of the offending edge.
        dst: Head node of the offending edge.
        cost: The negative cost reported for the edge.
    """

    def __init__(self, src: Node, dst: Node, cost: float) -> None:
        super().__init__(
            f"negative edge weight {cost} on edge {src.id} -> {dst.id}"
        )
        self.src = src
        self.dst = dst
        self.cost = cost


class Unorderable(ValueError):
    """Raised by ``topological_sort`` when the graph contains cycles.

    The exception carries the partial result so callers can still use the
    ordering of the acyclic part of the graph.

    Attributes:
        components: Cyclic strongly connected components, members sorted by
            node id, listed in topological order.
        sorted: The full ordering with ``None`` at the position of each cyclic
            component.
        max_nodes: Node count above which ``str()`` reports only a summary.
    """

    def __init__(
        self,
        components: Sequence[Sequence[Node]],
        sorted_nodes: Sequence[Optional[Node]],
        max_nodes: int = 10,
    ) -> None:
        self.components: List[List[Node]] = [list(c) for c in components]
        self.sorted: List[Optional[Node]] = list(sorted_nodes)
        self.max_nodes = max_nodes
        super().__init__(str(self))

    def __str__(self) -> str:
        n = sum(len(c) for c in self.components)
        if n > self.max_nodes:
            return (
                f"no topological ordering: {n} nodes in "
                f"{len(self.components)} cyclic components"
            )
        ids = [[node.id for node in c] for c in self.components]
        return f"no topological ordering: cyclic components: {ids}"

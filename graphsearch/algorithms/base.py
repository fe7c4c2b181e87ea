"""Shared aliases and capability resolution for graph algorithms.

Every algorithm resolves what it needs from the graph once, up front, into a
`GraphFuncs` bundle: whether the graph is directed, how to walk successors and
predecessors, how to look up an edge, and which cost and heuristic functions
to use. Cost and heuristic follow the same precedence:

    explicit argument > graph capability (``cost`` / ``heuristic_cost``) > default

The defaults are `uniform_cost` and `null_heuristic`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from graphsearch.graph.base import (
    Coster,
    DirectedGraph,
    Edge,
    Graph,
    HeuristicCoster,
    Node,
)

Cost = float
CostFunc = Callable[[Optional[Edge]], Cost]
HeuristicFunc = Callable[[Node, Node], Cost]


def uniform_cost(edge: Optional[Edge]) -> Cost:
    """Cost 1 for every existing edge and ``inf`` for a missing one."""
    if edge is None:
        return math.inf
    return 1.0


def null_heuristic(_u: Node, _v: Node) -> Cost:
    """Admissible, consistent heuristic that gives A* no guidance."""
    return 0.0


@dataclass(frozen=True)
class GraphFuncs:
    """Graph capabilities resolved for a single algorithm invocation.

    Attributes:
        directed: Whether the graph implements `DirectedGraph`.
        successors: Outgoing neighbors (``neighbors`` for undirected graphs).
        predecessors: Incoming neighbors (``neighbors`` for undirected graphs).
        edge_to: Edge lookup honoring direction (``edge_between`` otherwise).
        cost: Resolved edge cost function.
        heuristic_cost: Resolved heuristic function.
    """

    directed: bool
    successors: Callable[[Node], List[Node]]
    predecessors: Callable[[Node], List[Node]]
    edge_to: Callable[[Node, Node], Optional[Edge]]
    cost: CostFunc
    heuristic_cost: HeuristicFunc

    def is_successor(self, u: Node, v: Node) -> bool:
        """Return True if the edge ``u -> v`` exists."""
        return self.edge_to(u, v) is not None

    def is_predecessor(self, u: Node, v: Node) -> bool:
        """Return True if the edge ``v -> u`` exists."""
        return self.edge_to(v, u) is not None


def setup_funcs(
    graph: Graph,
    cost: Optional[CostFunc] = None,
    heuristic_cost: Optional[HeuristicFunc] = None,
) -> GraphFuncs:
    """Resolve the capabilities of ``graph`` into a `GraphFuncs` bundle.

    Args:
        graph: Any object implementing the `Graph` protocol.
        cost: Optional cost override.
        heuristic_cost: Optional heuristic override.

    Returns:
        GraphFuncs with every callable bound.
    """
    if isinstance(graph, DirectedGraph):
        directed = True
        successors = graph.successors
        predecessors = graph.predecessors
        edge_to = graph.edge_to
    else:
        directed = False
        successors = graph.neighbors
        predecessors = graph.neighbors
        edge_to = graph.edge_between

    if cost is None:
        cost = graph.cost if isinstance(graph, Coster) else uniform_cost
    if heuristic_cost is None:
        if isinstance(graph, HeuristicCoster):
            heuristic_cost = graph.heuristic_cost
        else:
            heuristic_cost = null_heuristic

    return GraphFuncs(
        directed=directed,
        successors=successors,
        predecessors=predecessors,
        edge_to=edge_to,
        cost=cost,
        heuristic_cost=heuristic_cost,
    )

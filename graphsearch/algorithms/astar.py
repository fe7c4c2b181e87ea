"""A* single-pair shortest path search.

The open set is a decrease-key `PriorityQueue` keyed by ``g + h`` where ``g``
is the best known cost from the start and ``h`` the heuristic estimate to the
goal. Settled nodes go to a closed set and are never reopened.

The returned path is optimal when the heuristic is admissible (it never
overestimates the remaining cost). Admissibility is the caller's obligation
and is not checked. A consistent heuristic (``h(u) <= c(u, v) + h(v)`` for
every edge) additionally guarantees no node would need reopening; setting
``SearchConfig.check_heuristic_consistency`` logs a warning for every edge
where that bound is violated.

Special cases:
    - ``null_heuristic`` turns A* into uniform cost search (Dijkstra).
    - ``null_heuristic`` with ``uniform_cost`` explores breadth-first.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional

from graphsearch.algorithms.base import (
    Cost,
    CostFunc,
    HeuristicFunc,
    setup_funcs,
)
from graphsearch.config import SEARCH_CONFIG, SearchConfig
from graphsearch.exceptions import NegativeEdgeWeightError
from graphsearch.graph.base import Graph, Node, NodeID
from graphsearch.logging import get_logger
from graphsearch.utils.priority_queue import PriorityQueue

_logger = get_logger(__name__)


class SearchResult(NamedTuple):
    """Outcome of an A* search.

    Attributes:
        path: Nodes from start to goal inclusive; empty when no path exists.
        cost: Total path cost; 0.0 when no path exists.
        expanded: Number of nodes popped from the open set.
    """

    path: List[Node]
    cost: Cost
    expanded: int


def _rebuild_path(predecessor: Dict[NodeID, Node], goal: Node) -> List[Node]:
    path = [goal]
    current = goal
    while current.id in predecessor:
        current = predecessor[current.id]
        path.append(current)
    path.reverse()
    return path


def a_star(
    start: Node,
    goal: Node,
    graph: Graph,
    cost: Optional[CostFunc] = None,
    heuristic_cost: Optional[HeuristicFunc] = None,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Find a shortest path from ``start`` to ``goal``.

    Args:
        start: Start node.
        goal: Goal node.
        graph: Graph to search; successors are used for directed graphs.
        cost: Optional cost override (argument > graph cost > uniform cost).
        heuristic_cost: Optional heuristic override (argument > graph
            heuristic > null heuristic).
        config: Optional configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        SearchResult. Not finding a path is a normal outcome reported as
        ``SearchResult([], 0.0, expanded)``.

    Raises:
        NegativeEdgeWeightError: If an expanded edge has negative cost.
    """
    config = config or SEARCH_CONFIG
    funcs = setup_funcs(graph, cost, heuristic_cost)
    heuristic = funcs.heuristic_cost

    closed: Dict[NodeID, Node] = {}
    g_score: Dict[NodeID, Cost] = {start.id: 0.0}
    predecessor: Dict[NodeID, Node] = {}
    open_set = PriorityQueue()
    open_set.push(start, heuristic(start, goal))

    expanded = 0
    while open_set:
        current, _ = open_set.pop()
        expanded += 1

        if current.id == goal.id:
            return SearchResult(
                _rebuild_path(predecessor, current), g_score[current.id], expanded
            )

        closed[current.id] = current
        current_g = g_score[current.id]
        current_h = heuristic(current, goal) if config.check_heuristic_consistency else 0.0

        for neighbor in funcs.successors(current):
            if neighbor.id in closed:
                continue

            weight = funcs.cost(funcs.edge_to(current, neighbor))
            if weight < 0:
                raise NegativeEdgeWeightError(current, neighbor, weight)

            neighbor_h = heuristic(neighbor, goal)
            if config.check_heuristic_consistency and current_h > weight + neighbor_h:
                _logger.warning(
                    "Inconsistent heuristic on edge %s -> %s: h=%s > %s + %s",
                    current.id,
                    neighbor.id,
                    current_h,
                    weight,
                    neighbor_h,
                )

            g = current_g + weight
            if neighbor not in open_set:
                predecessor[neighbor.id] = current
                g_score[neighbor.id] = g
                open_set.push(neighbor, g + neighbor_h)
            elif g < g_score[neighbor.id]:
                predecessor[neighbor.id] = current
                g_score[neighbor.id] = g
                open_set.decrease(neighbor, g + neighbor_h)

    _logger.debug(
        "No path from %s to %s after expanding %d nodes", start.id, goal.id, expanded
    )
    return SearchResult([], 0.0, expanded)

"""Dijkstra shortest-path trees.

``dijkstra_from`` builds a single-source shortest-path tree. ``dijkstra_all_paths``
runs the same relaxation from every node and additionally keeps every
predecessor that reaches a node at its minimal distance, so all co-equal
shortest paths can be enumerated afterwards.

Both use the decrease-key `PriorityQueue`: a node is queued at most once and
its priority is lowered in place when a shorter route is found.

Notes:
    Edge costs must be non-negative. The first negative cost met during
    relaxation raises `NegativeEdgeWeightError`. When several paths share the
    minimal cost, which one ``path_to`` / ``between`` returns depends on heap
    order and must not be relied upon.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from graphsearch.algorithms.base import Cost, CostFunc, GraphFuncs, setup_funcs
from graphsearch.exceptions import NegativeEdgeWeightError
from graphsearch.graph.base import Graph, Node, NodeID
from graphsearch.logging import get_logger
from graphsearch.utils.priority_queue import PriorityQueue

_logger = get_logger(__name__)


class ShortestPathTree:
    """Shortest paths from a single source.

    Attributes:
        source: The source node.
        nodes: Nodes of the graph, indexed by slot.
        index_of: Mapping of node id to slot.
        dist: Distance from the source per slot (``inf`` when unreachable).
        prev: Predecessor slot per slot (``-1`` for the source and for
            unreachable nodes).
    """

    def __init__(self, source: Node, nodes: Sequence[Node]) -> None:
        self.source = source
        self.nodes: List[Node] = list(nodes)
        self.index_of: Dict[NodeID, int] = {n.id: i for i, n in enumerate(self.nodes)}
        self.dist: List[Cost] = [math.inf] * len(self.nodes)
        self.prev: List[int] = [-1] * len(self.nodes)
        if source.id in self.index_of:
            self.dist[self.index_of[source.id]] = 0.0

    def _set(self, to: int, weight: Cost, mid: int) -> None:
        self.dist[to] = weight
        self.prev[to] = mid

    def weight_to(self, node: Node) -> Cost:
        """Return the distance from the source to ``node`` (``inf`` if unreachable)."""
        slot = self.index_of.get(node.id)
        if slot is None:
            return math.inf
        return self.dist[slot]

    def predecessor(self, node: Node) -> Optional[Node]:
        """Return the node preceding ``node`` on its shortest path, if any."""
        slot = self.index_of.get(node.id)
        if slot is None or self.prev[slot] < 0:
            return None
        return self.nodes[self.prev[slot]]

    def path_to(self, node: Node) -> Tuple[List[Node], Cost]:
        """Return the shortest path from the source to ``node`` and its weight.

        Returns:
            ``(path, weight)``; ``([], inf)`` when ``node`` is unreachable.
        """
        slot = self.index_of.get(node.id)
        if slot is None or math.isinf(self.dist[slot]):
            return [], math.inf
        weight = self.dist[slot]
        path = [self.nodes[slot]]
        while self.prev[slot] >= 0:
            slot = self.prev[slot]
            path.append(self.nodes[slot])
        path.reverse()
        return path, weight

    def distances(self) -> Dict[NodeID, Cost]:
        """Return distances of reachable nodes keyed by node id."""
        return {
            n.id: d for n, d in zip(self.nodes, self.dist) if not math.isinf(d)
        }


def _check_weight(funcs: GraphFuncs, u: Node, v: Node) -> Cost:
    weight = funcs.cost(funcs.edge_to(u, v))
    if weight < 0:
        raise NegativeEdgeWeightError(u, v, weight)
    return weight


def dijkstra_from(
    source: Node,
    graph: Graph,
    cost: Optional[CostFunc] = None,
) -> ShortestPathTree:
    """Compute the shortest-path tree rooted at ``source``.

    Args:
        source: Start node. If it is not in the graph, the returned tree is
            empty and every query reports ``inf``.
        graph: Graph to search; successors are used for directed graphs.
        cost: Optional cost override (argument > graph cost > uniform cost).

    Returns:
        ShortestPathTree covering every node of the graph.

    Raises:
        NegativeEdgeWeightError: If a reachable edge has negative cost.
    """
    if not graph.node_exists(source):
        return ShortestPathTree(source, [])

    funcs = setup_funcs(graph, cost)
    tree = ShortestPathTree(source, graph.node_list())

    queue = PriorityQueue()
    queue.push(source, 0.0)
    while queue:
        mid, _ = queue.pop()
        k = tree.index_of[mid.id]
        for v in funcs.successors(mid):
            weight = _check_weight(funcs, mid, v)
            j = tree.index_of[v.id]
            joint = tree.dist[k] + weight
            if joint < tree.dist[j]:
                if v in queue:
                    queue.decrease(v, joint)
                else:
                    queue.push(v, joint)
                tree._set(j, joint, k)

    return tree


class ShortestPaths:
    """Shortest paths between every ordered pair of nodes.

    Attributes:
        nodes: Nodes of the graph, indexed by slot.
        index_of: Mapping of node id to slot.
        dist: Dense ``(n, n)`` matrix; ``dist[i, j]`` is the distance from
            slot ``i`` to slot ``j`` (``inf`` when unreachable).
    """

    def __init__(self, nodes: Sequence[Node]) -> None:
        self.nodes: List[Node] = list(nodes)
        self.index_of: Dict[NodeID, int] = {n.id: i for i, n in enumerate(self.nodes)}
        n = len(self.nodes)
        self.dist = np.full((n, n), np.inf, dtype=np.float64)
        # Co-equal predecessor slots, row-major by (source slot, node slot).
        self._prev: List[List[int]] = [[] for _ in range(n * n)]

    def _set(self, i: int, j: int, weight: Cost, mid: int) -> None:
        self.dist[i, j] = weight
        self._prev[i * len(self.nodes) + j] = [mid]

    def _add(self, i: int, j: int, mid: int) -> None:
        prev = self._prev[i * len(self.nodes) + j]
        if mid not in prev:
            prev.append(mid)

    def _slots(self, u: Node, v: Node) -> Optional[Tuple[int, int]]:
        i = self.index_of.get(u.id)
        j = self.index_of.get(v.id)
        if i is None or j is None:
            return None
        return i, j

    def predecessors(self, u: Node, v: Node) -> List[Node]:
        """Return every node preceding ``v`` on a shortest path from ``u``."""
        slots = self._slots(u, v)
        if slots is None:
            return []
        i, j = slots
        return [self.nodes[k] for k in self._prev[i * len(self.nodes) + j]]

    def weight(self, u: Node, v: Node) -> Cost:
        """Return the shortest distance from ``u`` to ``v``."""
        slots = self._slots(u, v)
        if slots is None:
            return math.inf
        return float(self.dist[slots])

    def between(self, u: Node, v: Node) -> Tuple[List[Node], Cost, bool]:
        """Return one shortest path from ``u`` to ``v``.

        Returns:
            ``(path, weight, unique)``. ``unique`` is False when some node on
            the path has more than one co-equal predecessor, meaning other
            paths of the same weight exist. An unreachable ``v`` gives
            ``([], inf, False)``.
        """
        slots = self._slots(u, v)
        if slots is None or math.isinf(self.dist[slots]):
            return [], math.inf, False
        i, j = slots
        n = len(self.nodes)
        weight = float(self.dist[i, j])
        unique = True
        path = [self.nodes[j]]
        while j != i:
            prev = self._prev[i * n + j]
            if len(prev) > 1:
                unique = False
            # The first predecessor was recorded by a strict improvement from
            # an already settled node, so following it always terminates.
            j = prev[0]
            path.append(self.nodes[j])
        path.reverse()
        return path, weight, unique

    def all_between(self, u: Node, v: Node) -> Tuple[List[List[Node]], Cost]:
        """Return every shortest path from ``u`` to ``v``.

        Returns:
            ``(paths, weight)``; ``([], inf)`` when ``v`` is unreachable.
        """
        slots = self._slots(u, v)
        if slots is None or math.isinf(self.dist[slots]):
            return [], math.inf
        i, j = slots
        n = len(self.nodes)
        paths: List[List[Node]] = []

        # Walk backwards from v; zero-cost cycles can make predecessor links
        # circular, so a node is never revisited within one path.
        stack: List[Tuple[int, List[int]]] = [(j, [j])]
        while stack:
            slot, suffix = stack.pop()
            if slot == i:
                paths.append([self.nodes[k] for k in reversed(suffix)])
                continue
            for k in self._prev[i * n + slot]:
                if k not in suffix:
                    stack.append((k, suffix + [k]))

        return paths, float(self.dist[i, j])


def dijkstra_all_paths(
    graph: Graph,
    cost: Optional[CostFunc] = None,
) -> ShortestPaths:
    """Compute shortest paths between all pairs of nodes, keeping co-equal paths.

    Args:
        graph: Graph to search; successors are used for directed graphs.
        cost: Optional cost override (argument > graph cost > uniform cost).

    Returns:
        ShortestPaths with a dense distance matrix and co-equal predecessors.

    Raises:
        NegativeEdgeWeightError: If any edge reached has negative cost.
    """
    funcs = setup_funcs(graph, cost)
    paths = ShortestPaths(graph.node_list())
    _logger.debug("Computing all-pairs shortest paths over %d nodes", len(paths.nodes))

    for i, u in enumerate(paths.nodes):
        paths.dist[i, i] = 0.0
        queue = PriorityQueue()
        queue.push(u, 0.0)
        while queue:
            mid, _ = queue.pop()
            k = paths.index_of[mid.id]
            for v in funcs.successors(mid):
                weight = _check_weight(funcs, mid, v)
                j = paths.index_of[v.id]
                joint = paths.dist[i, k] + weight
                if joint < paths.dist[i, j]:
                    if v in queue:
                        queue.decrease(v, joint)
                    else:
                        queue.push(v, joint)
                    paths._set(i, j, joint, k)
                elif joint == paths.dist[i, j] and j != i and not math.isinf(joint):
                    paths._add(i, j, k)

    return paths

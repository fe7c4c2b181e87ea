"""Minimum spanning tree builders.

Each builder writes its result into a caller-supplied mutable graph ``dst``:
every node of the input is added, and each tree edge is added with
``dst.add_undirected_edge(edge, cost)``. A disconnected input yields a
minimum spanning forest.

``dst`` must share no node ids with the input (normally it starts empty).

Three builders are provided:
    - ``kruskal``: sort all edges by cost, accept those joining two different
      components of a `DisjointSet`. Ties keep edge-list order.
    - ``prim``: the set-based variant; every round rescans the whole edge list
      for the cheapest edge leaving the tree, O(V * E).
    - ``prim_heap``: Prim with the decrease-key `PriorityQueue`,
      O(E log V).

All three produce a tree of minimum total cost; with tied costs they may pick
different edges.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from graphsearch.algorithms.base import CostFunc, setup_funcs
from graphsearch.graph.base import (
    Edge,
    EdgeListGraph,
    MutableGraph,
    Node,
    NodeID,
    WeightedEdge,
)
from graphsearch.logging import get_logger
from graphsearch.utils.disjoint_set import DisjointSet
from graphsearch.utils.priority_queue import PriorityQueue

_logger = get_logger(__name__)


def _init_dst(dst: MutableGraph, nodes: List[Node]) -> None:
    """Add ``nodes`` to ``dst`` after checking no id is already taken.

    Raises:
        ValueError: If ``dst`` already holds a node with one of the ids.
    """
    clashes = [n.id for n in nodes if dst.node_exists(n)]
    if clashes:
        raise ValueError(
            f"Destination graph already contains node ids {sorted(clashes)}."
        )
    for node in nodes:
        dst.add_node(node)


def kruskal(
    dst: MutableGraph,
    graph: EdgeListGraph,
    cost: Optional[CostFunc] = None,
) -> None:
    """Write a minimum spanning tree of ``graph`` into ``dst`` using Kruskal.

    Args:
        dst: Empty mutable graph receiving the tree.
        graph: Graph providing ``edge_list``.
        cost: Optional cost override (argument > graph cost > uniform cost).

    Raises:
        ValueError: If ``dst`` shares node ids with ``graph``.
    """
    cost = setup_funcs(graph, cost).cost
    nodes = graph.node_list()
    _init_dst(dst, nodes)

    edges = [WeightedEdge(e, cost(e)) for e in graph.edge_list()]
    edges.sort(key=lambda we: we.cost)

    ds = DisjointSet(n.id for n in nodes)
    for we in edges:
        # Orientation does not matter to the disjoint set.
        s1, s2 = ds.find(we.edge.src.id), ds.find(we.edge.dst.id)
        if s1 != s2:
            ds.union(s1, s2)
            dst.add_undirected_edge(we.edge, we.cost)


def prim(
    dst: MutableGraph,
    graph: EdgeListGraph,
    cost: Optional[CostFunc] = None,
) -> None:
    """Write a minimum spanning tree of ``graph`` into ``dst`` using set-based Prim.

    Simple rather than fast: each round scans every edge. Use ``prim_heap``
    for large graphs.

    Args:
        dst: Empty mutable graph receiving the tree.
        graph: Graph providing ``edge_list``.
        cost: Optional cost override (argument > graph cost > uniform cost).

    Raises:
        ValueError: If ``dst`` shares node ids with ``graph``.
    """
    cost = setup_funcs(graph, cost).cost
    nodes = graph.node_list()
    _init_dst(dst, nodes)
    if not nodes:
        return

    in_tree = {nodes[0].id}
    remaining: Dict[NodeID, Node] = {n.id: n for n in nodes[1:]}
    edge_list = graph.edge_list()

    while remaining:
        best: Optional[WeightedEdge] = None
        for edge in edge_list:
            src_in, dst_in = edge.src.id in in_tree, edge.dst.id in in_tree
            if src_in == dst_in:
                continue
            c = cost(edge)
            if best is None or c < best.cost:
                best = WeightedEdge(edge, c)

        if best is None:
            # Nothing leaves this component; start the next tree of the forest.
            node_id = next(iter(remaining))
            del remaining[node_id]
            in_tree.add(node_id)
            continue

        dst.add_undirected_edge(best.edge, best.cost)
        new_id = best.edge.dst.id if best.edge.src.id in in_tree else best.edge.src.id
        del remaining[new_id]
        in_tree.add(new_id)


def prim_heap(
    dst: MutableGraph,
    graph: EdgeListGraph,
    cost: Optional[CostFunc] = None,
) -> None:
    """Write a minimum spanning tree of ``graph`` into ``dst`` using heap-based Prim.

    Each node outside the tree is queued by the cost of its cheapest known
    edge into the tree; that priority is lowered as the tree grows.

    Args:
        dst: Empty mutable graph receiving the tree.
        graph: Graph providing ``edge_list``.
        cost: Optional cost override (argument > graph cost > uniform cost).

    Raises:
        ValueError: If ``dst`` shares node ids with ``graph``.
    """
    cost = setup_funcs(graph, cost).cost
    nodes = graph.node_list()
    _init_dst(dst, nodes)

    # Undirected adjacency built from the edge list, so direction is ignored.
    adjacency: Dict[NodeID, List[Edge]] = {n.id: [] for n in nodes}
    for edge in graph.edge_list():
        adjacency[edge.src.id].append(edge)
        adjacency[edge.dst.id].append(edge)

    in_tree: Set[NodeID] = set()
    best_edge: Dict[NodeID, WeightedEdge] = {}
    trees = 0
    for root in nodes:
        if root.id in in_tree:
            continue
        trees += 1
        queue = PriorityQueue()
        queue.push(root, 0.0)
        while queue:
            u, _ = queue.pop()
            in_tree.add(u.id)
            if u.id in best_edge:
                we = best_edge[u.id]
                dst.add_undirected_edge(we.edge, we.cost)

            for edge in adjacency[u.id]:
                v = edge.dst if edge.src.id == u.id else edge.src
                if v.id in in_tree:
                    continue
                c = cost(edge)
                if v in queue:
                    if queue.decrease(v, c):
                        best_edge[v.id] = WeightedEdge(edge, c)
                else:
                    queue.push(v, c)
                    best_edge[v.id] = WeightedEdge(edge, c)

    _logger.debug("prim_heap built a spanning forest of %d trees", trees)

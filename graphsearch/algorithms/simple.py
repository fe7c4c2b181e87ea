"""Path validation and graph copy helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from graphsearch.algorithms.base import setup_funcs
from graphsearch.graph.base import (
    DirectedGraph,
    Graph,
    MutableDirectedGraph,
    MutableGraph,
    Node,
)


def is_path(path: Optional[Sequence[Node]], graph: Graph) -> bool:
    """Return True if consecutive nodes of ``path`` are connected in ``graph``.

    An empty (or None) path is valid. A single-node path is valid when the
    node exists. Otherwise every ``path[i + 1]`` must be a successor of
    ``path[i]`` (a neighbor, for undirected graphs).
    """
    if not path:
        return True
    if len(path) == 1:
        return graph.node_exists(path[0])

    funcs = setup_funcs(graph)
    return all(funcs.is_successor(u, v) for u, v in zip(path, path[1:]))


def copy_undirected_graph(dst: MutableGraph, src: Graph) -> None:
    """Copy the nodes and costed edges of ``src`` into ``dst``, keeping node ids.

    ``dst`` need not be empty; existing nodes are reused and edges between
    the same pair of nodes are overwritten.
    """
    cost = setup_funcs(src).cost
    for node in src.node_list():
        if not dst.node_exists(node):
            dst.add_node(node)
        for succ in src.neighbors(node):
            edge = src.edge_between(node, succ)
            dst.add_undirected_edge(edge, cost(edge))


def copy_directed_graph(dst: MutableDirectedGraph, src: DirectedGraph) -> None:
    """Copy the nodes and costed directed edges of ``src`` into ``dst``.

    ``dst`` need not be empty; existing nodes are reused and edges with the
    same endpoints are overwritten.
    """
    cost = setup_funcs(src).cost
    for node in src.node_list():
        if not dst.node_exists(node):
            dst.add_node(node)
        for succ in src.successors(node):
            edge = src.edge_to(node, succ)
            dst.add_directed_edge(edge, cost(edge))

"""graphsearch: graph search and analysis algorithms.

The algorithms operate on any object implementing the graph capability
protocols in `graphsearch.graph.base`; networkx-backed `UndirectedGraph` and
`DiGraph` are provided for convenience.

Example:
    from graphsearch import DiGraph, Edge, Node, dijkstra_from

    g = DiGraph()
    a, b, c = Node(0), Node(1), Node(2)
    g.add_directed_edge(Edge(a, b), cost=1)
    g.add_directed_edge(Edge(b, c), cost=2)

    tree = dijkstra_from(a, g)
    path, weight = tree.path_to(c)   # [a, b, c], 3.0
"""

from __future__ import annotations

from graphsearch import logging
from graphsearch._version import __version__
from graphsearch.algorithms import (
    DepthFirst,
    SearchResult,
    ShortestPaths,
    ShortestPathTree,
    a_star,
    bron_kerbosch,
    connected_components,
    copy_directed_graph,
    copy_undirected_graph,
    dijkstra_all_paths,
    dijkstra_from,
    dominators,
    is_path,
    kruskal,
    null_heuristic,
    post_dominators,
    prim,
    prim_heap,
    tarjan_scc,
    topological_sort,
    uniform_cost,
    vertex_ordering,
)
from graphsearch.config import SEARCH_CONFIG, SearchConfig
from graphsearch.exceptions import NegativeEdgeWeightError, Unorderable
from graphsearch.graph import DiGraph, Edge, Node, UndirectedGraph, WeightedEdge
from graphsearch.utils import DisjointSet, NodeSet, PriorityQueue

__all__ = [
    # Version
    "__version__",
    # Graph
    "Node",
    "Edge",
    "WeightedEdge",
    "UndirectedGraph",
    "DiGraph",
    # Shortest paths
    "dijkstra_from",
    "dijkstra_all_paths",
    "a_star",
    "ShortestPathTree",
    "ShortestPaths",
    "SearchResult",
    "uniform_cost",
    "null_heuristic",
    # Components and ordering
    "tarjan_scc",
    "topological_sort",
    "connected_components",
    "vertex_ordering",
    "bron_kerbosch",
    "DepthFirst",
    # Spanning trees
    "kruskal",
    "prim",
    "prim_heap",
    # Dominators
    "dominators",
    "post_dominators",
    # Helpers
    "is_path",
    "copy_undirected_graph",
    "copy_directed_graph",
    # Utilities
    "DisjointSet",
    "NodeSet",
    "PriorityQueue",
    # Configuration and errors
    "SearchConfig",
    "SEARCH_CONFIG",
    "NegativeEdgeWeightError",
    "Unorderable",
    "logging",
]

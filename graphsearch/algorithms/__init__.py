"""Search and analysis algorithms over the graph capability interface.

Every function takes a graph (plus optional cost or heuristic overrides),
builds its own auxiliary state and returns a self-contained result. No
function mutates its input graph.
"""

from graphsearch.algorithms.astar import SearchResult, a_star
from graphsearch.algorithms.base import (
    Cost,
    CostFunc,
    GraphFuncs,
    HeuristicFunc,
    null_heuristic,
    setup_funcs,
    uniform_cost,
)
from graphsearch.algorithms.cliques import bron_kerbosch, vertex_ordering
from graphsearch.algorithms.components import (
    connected_components,
    tarjan_scc,
    topological_sort,
)
from graphsearch.algorithms.dijkstra import (
    ShortestPaths,
    ShortestPathTree,
    dijkstra_all_paths,
    dijkstra_from,
)
from graphsearch.algorithms.dominators import (
    DominatorMap,
    dominators,
    post_dominators,
)
from graphsearch.algorithms.simple import (
    copy_directed_graph,
    copy_undirected_graph,
    is_path,
)
from graphsearch.algorithms.spanning_tree import kruskal, prim, prim_heap
from graphsearch.algorithms.traverse import DepthFirst

__all__ = [
    # Cost resolution
    "Cost",
    "CostFunc",
    "HeuristicFunc",
    "GraphFuncs",
    "setup_funcs",
    "uniform_cost",
    "null_heuristic",
    # Shortest paths
    "ShortestPathTree",
    "ShortestPaths",
    "dijkstra_from",
    "dijkstra_all_paths",
    "SearchResult",
    "a_star",
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
    "DominatorMap",
    "dominators",
    "post_dominators",
    # Helpers
    "is_path",
    "copy_undirected_graph",
    "copy_directed_graph",
]

"""Small auxiliary structures shared by the algorithms.

Each module is self-contained and depends only on `graphsearch.graph.base`.
"""

from graphsearch.utils.disjoint_set import DisjointSet
from graphsearch.utils.node_set import NodeSet
from graphsearch.utils.priority_queue import PriorityQueue

__all__ = [
    "DisjointSet",
    "NodeSet",
    "PriorityQueue",
]

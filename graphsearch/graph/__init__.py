"""Graph primitives, capability protocols and concrete graph types.

`base` defines `Node`, `Edge` and the protocols the algorithms consume;
`concrete` provides networkx-backed `UndirectedGraph` and `DiGraph` implementations.
"""

from graphsearch.graph.base import (
    Coster,
    DirectedGraph,
    Edge,
    EdgeListGraph,
    Graph,
    HeuristicCoster,
    MutableDirectedGraph,
    MutableGraph,
    Node,
    NodeID,
    WeightedEdge,
)
from graphsearch.graph.concrete import DiGraph, UndirectedGraph

__all__ = [
    "Coster",
    "DirectedGraph",
    "Edge",
    "EdgeListGraph",
    "Graph",
    "HeuristicCoster",
    "MutableDirectedGraph",
    "MutableGraph",
    "Node",
    "NodeID",
    "WeightedEdge",
    "DiGraph",
    "UndirectedGraph",
]

"""Graph primitives and the capability interface consumed by the algorithms.

Algorithms never depend on a concrete storage type. They accept any object
implementing the ``Graph`` protocol and probe once, at the start of a call,
for the optional capabilities (``DirectedGraph``, ``Coster``,
``HeuristicCoster``, ``EdgeListGraph``). Node identity is the integer
``Node.id``; it is the only key used for auxiliary state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable

NodeID = int


@dataclass(frozen=True, order=True)
class Node:
    """A graph vertex identified by a unique integer.

    Attributes:
        id: Identity of the node, stable for the lifetime of its graph.
    """

    id: NodeID

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class Edge:
    """A pair of nodes. For undirected graphs the orientation carries no meaning.

    Attributes:
        src: Tail node.
        dst: Head node.
    """

    src: Node
    dst: Node


@dataclass(frozen=True)
class WeightedEdge:
    """An edge paired with the cost resolved for it."""

    edge: Edge
    cost: float


@runtime_checkable
class Graph(Protocol):
    """Read-only undirected view of a graph."""

    def node_exists(self, node: Node) -> bool: ...

    def node_list(self) -> List[Node]: ...

    def neighbors(self, node: Node) -> List[Node]: ...

    def edge_between(self, u: Node, v: Node) -> Optional[Edge]: ...


@runtime_checkable
class DirectedGraph(Graph, Protocol):
    """Graph that also distinguishes edge direction."""

    def successors(self, node: Node) -> List[Node]: ...

    def predecessors(self, node: Node) -> List[Node]: ...

    def edge_to(self, u: Node, v: Node) -> Optional[Edge]: ...


@runtime_checkable
class EdgeListGraph(Graph, Protocol):
    """Graph able to enumerate its edges; required by spanning-tree builders."""

    def edge_list(self) -> List[Edge]: ...


@runtime_checkable
class Coster(Protocol):
    """Graph capability providing edge costs."""

    def cost(self, edge: Optional[Edge]) -> float: ...


@runtime_checkable
class HeuristicCoster(Protocol):
    """Graph capability providing an A* heuristic."""

    def heuristic_cost(self, u: Node, v: Node) -> float: ...


@runtime_checkable
class MutableGraph(Graph, Protocol):
    """Undirected graph accepting new nodes and edges."""

    def add_node(self, node: Node) -> None: ...

    def add_undirected_edge(self, edge: Edge, cost: float = 1.0) -> None: ...


@runtime_checkable
class MutableDirectedGraph(DirectedGraph, Protocol):
    """Directed graph accepting new nodes and edges."""

    def add_node(self, node: Node) -> None: ...

    def add_directed_edge(self, edge: Edge, cost: float = 1.0) -> None: ...

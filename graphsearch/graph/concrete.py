"""NetworkX-backed implementations of the graph capability interface.

`UndirectedGraph` and `DiGraph` (directed) keep their adjacency in a
``networkx`` graph keyed by node id. Each networkx node stores the original
`Node` object under the ``"node"`` attribute and each edge stores its cost
under ``"cost"``.

Both classes are strict in the same way:
  - Adding a node whose id is already present raises ValueError.
  - Removing a missing node or edge raises ValueError.
  - Adding an edge creates missing endpoint nodes.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional

import networkx as nx

from graphsearch.graph.base import Edge, Node


class _NetworkXGraph:
    """Node bookkeeping shared by `UndirectedGraph` and `DiGraph`."""

    _nx_class: Any = nx.Graph

    def __init__(self) -> None:
        self._graph = self._nx_class()
        # Ids handed out by new_node() only move forward.
        self._next_id: int = 0

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, node: Node) -> bool:
        return self.node_exists(node)

    def _node(self, node_id: int) -> Node:
        return self._graph.nodes[node_id]["node"]

    def new_node(self) -> Node:
        """Return a node whose id is not used in this graph.

        The node is not added to the graph.
        """
        while self._next_id in self._graph:
            self._next_id += 1
        return Node(self._next_id)

    def node_exists(self, node: Node) -> bool:
        return node.id in self._graph

    def node_list(self) -> List[Node]:
        return [data["node"] for _, data in self._graph.nodes(data=True)]

    def add_node(self, node: Node) -> None:
        """Add a single node, disallowing duplicate ids.

        Args:
            node: The node to add.

        Raises:
            ValueError: If a node with the same id already exists.
        """
        if node.id in self._graph:
            raise ValueError(f"Node '{node.id}' already exists in this graph.")
        self._graph.add_node(node.id, node=node)

    def remove_node(self, node: Node) -> None:
        """Remove a node and every edge incident to it.

        Raises:
            ValueError: If the node does not exist.
        """
        if node.id not in self._graph:
            raise ValueError(f"Node '{node.id}' does not exist.")
        self._graph.remove_node(node.id)

    def _ensure_node(self, node: Node) -> None:
        if node.id not in self._graph:
            self._graph.add_node(node.id, node=node)

    def _edge_cost(self, u: Node, v: Node) -> float:
        data = self._graph.get_edge_data(u.id, v.id)
        if data is None:
            return math.inf
        return data["cost"]

    def to_networkx(self) -> Any:
        """Return a networkx copy keyed by node id with ``cost`` edge attributes."""
        graph = self._nx_class()
        graph.add_nodes_from(self._graph.nodes)
        graph.add_edges_from(
            (u, v, {"cost": data["cost"]})
            for u, v, data in self._graph.edges(data=True)
        )
        return graph


class UndirectedGraph(_NetworkXGraph):
    """Undirected graph with costed edges.

    ``edge_between(u, v)`` returns an `Edge` oriented as queried; the stored
    cost is symmetric.
    """

    _nx_class = nx.Graph

    def neighbors(self, node: Node) -> List[Node]:
        if node.id not in self._graph:
            return []
        return [self._node(n) for n in self._graph.adj[node.id]]

    def edge_between(self, u: Node, v: Node) -> Optional[Edge]:
        if not self._graph.has_edge(u.id, v.id):
            return None
        return Edge(u, v)

    def has_edge(self, u: Node, v: Node) -> bool:
        return self._graph.has_edge(u.id, v.id)

    def edge_list(self) -> List[Edge]:
        return [Edge(self._node(u), self._node(v)) for u, v in self._graph.edges()]

    def cost(self, edge: Optional[Edge]) -> float:
        """Return the stored cost of ``edge``, or ``inf`` if it does not exist."""
        if edge is None:
            return math.inf
        return self._edge_cost(edge.src, edge.dst)

    def add_undirected_edge(self, edge: Edge, cost: float = 1.0) -> None:
        """Add (or overwrite) the edge between ``edge.src`` and ``edge.dst``.

        Missing endpoint nodes are added.
        """
        self._ensure_node(edge.src)
        self._ensure_node(edge.dst)
        self._graph.add_edge(edge.src.id, edge.dst.id, cost=cost)

    def remove_undirected_edge(self, edge: Edge) -> None:
        """Remove the edge between ``edge.src`` and ``edge.dst``.

        Raises:
            ValueError: If there is no such edge.
        """
        if not self._graph.has_edge(edge.src.id, edge.dst.id):
            raise ValueError(
                f"No edge between '{edge.src.id}' and '{edge.dst.id}' to remove."
            )
        self._graph.remove_edge(edge.src.id, edge.dst.id)


class DiGraph(_NetworkXGraph):
    """Directed graph with costed edges.

    ``neighbors`` and ``edge_between`` give the undirected view (edges in
    either direction); ``successors``, ``predecessors`` and ``edge_to``
    respect direction.
    """

    _nx_class = nx.DiGraph

    def successors(self, node: Node) -> List[Node]:
        if node.id not in self._graph:
            return []
        return [self._node(n) for n in self._graph.succ[node.id]]

    def predecessors(self, node: Node) -> List[Node]:
        if node.id not in self._graph:
            return []
        return [self._node(n) for n in self._graph.pred[node.id]]

    def neighbors(self, node: Node) -> List[Node]:
        if node.id not in self._graph:
            return []
        seen = dict.fromkeys(self._graph.succ[node.id])
        seen.update(dict.fromkeys(self._graph.pred[node.id]))
        return [self._node(n) for n in seen]

    def edge_to(self, u: Node, v: Node) -> Optional[Edge]:
        if not self._graph.has_edge(u.id, v.id):
            return None
        return Edge(u, v)

    def edge_between(self, u: Node, v: Node) -> Optional[Edge]:
        if self._graph.has_edge(u.id, v.id):
            return Edge(u, v)
        if self._graph.has_edge(v.id, u.id):
            return Edge(v, u)
        return None

    def has_edge(self, u: Node, v: Node) -> bool:
        return self._graph.has_edge(u.id, v.id)

    def edge_list(self) -> List[Edge]:
        return [Edge(self._node(u), self._node(v)) for u, v in self._graph.edges()]

    def cost(self, edge: Optional[Edge]) -> float:
        """Return the stored cost of ``edge``, or ``inf`` if it does not exist."""
        if edge is None:
            return math.inf
        return self._edge_cost(edge.src, edge.dst)

    def add_directed_edge(self, edge: Edge, cost: float = 1.0) -> None:
        """Add (or overwrite) the edge ``edge.src -> edge.dst``.

        Missing endpoint nodes are added.
        """
        self._ensure_node(edge.src)
        self._ensure_node(edge.dst)
        self._graph.add_edge(edge.src.id, edge.dst.id, cost=cost)

    def remove_directed_edge(self, edge: Edge) -> None:
        """Remove the edge ``edge.src -> edge.dst``.

        Raises:
            ValueError: If there is no such edge.
        """
        if not self._graph.has_edge(edge.src.id, edge.dst.id):
            raise ValueError(
                f"No edge from '{edge.src.id}' to '{edge.dst.id}' to remove."
            )
        self._graph.remove_edge(edge.src.id, edge.dst.id)

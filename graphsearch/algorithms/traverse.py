"""Depth-first graph traversal.

`DepthFirst` walks a graph with an explicit stack, so its depth is not bound
by the interpreter recursion limit. Edges are followed through ``neighbors``,
which for directed graphs is the undirected view.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Set

from graphsearch.graph.base import Graph, Node, NodeID


class DepthFirst:
    """Depth-first walker that remembers visited nodes across walks.

    Attributes:
        edge_filter: Optional predicate ``(u, v) -> bool``; edges for which it
            returns False are not followed.
        visit: Optional callback ``(u, v)`` invoked for every followed edge
            leading to an unvisited node.
    """

    def __init__(
        self,
        edge_filter: Optional[Callable[[Node, Node], bool]] = None,
        visit: Optional[Callable[[Node, Node], None]] = None,
    ) -> None:
        self.edge_filter = edge_filter
        self.visit = visit
        self._visited: Set[NodeID] = set()

    def visited(self, node: Node) -> bool:
        return node.id in self._visited

    def reset(self) -> None:
        """Forget every visited node."""
        self._visited.clear()

    def walk(
        self,
        graph: Graph,
        start: Node,
        until: Optional[Callable[[Node], bool]] = None,
        during: Optional[Callable[[Node], None]] = None,
    ) -> Optional[Node]:
        """Walk depth-first from ``start``.

        Args:
            graph: Graph to traverse.
            start: Node to start from; skipped if already visited.
            until: Optional predicate; the walk stops at the first popped
                node for which it returns True.
            during: Optional callback for every node as it is visited.

        Returns:
            The node that satisfied ``until``, or None if the walk exhausted
            everything reachable.
        """
        stack: List[Node] = [start]
        while stack:
            node = stack.pop()
            if node.id in self._visited:
                continue
            self._visited.add(node.id)
            if during is not None:
                during(node)
            if until is not None and until(node):
                return node
            for nbr in graph.neighbors(node):
                if nbr.id in self._visited:
                    continue
                if self.edge_filter is not None and not self.edge_filter(node, nbr):
                    continue
                if self.visit is not None:
                    self.visit(node, nbr)
                stack.append(nbr)
        return None

    def walk_all(
        self,
        graph: Graph,
        before: Optional[Callable[[], None]] = None,
        after: Optional[Callable[[], None]] = None,
        during: Optional[Callable[[Node], None]] = None,
    ) -> None:
        """Walk every unvisited node of ``graph``, one component at a time.

        Args:
            graph: Graph to traverse.
            before: Called before each component walk.
            after: Called after each component walk.
            during: Called for every node as it is visited.
        """
        for node in graph.node_list():
            if node.id in self._visited:
                continue
            if before is not None:
                before()
            self.walk(graph, node, during=during)
            if after is not None:
                after()

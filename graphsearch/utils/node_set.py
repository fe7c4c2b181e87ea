"""Mutable set of nodes with value semantics.

Membership is keyed by node id. ``copy``, ``union`` and ``intersection`` always
return a new, independent set, so callers never alias another set's storage.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from graphsearch.graph.base import Node, NodeID


class NodeSet:
    """An unordered collection of nodes."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: Dict[NodeID, Node] = {n.id: n for n in nodes}

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def __contains__(self, node: object) -> bool:
        return getattr(node, "id", None) in self._nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeSet):
            return NotImplemented
        return self._nodes.keys() == other._nodes.keys()

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: NodeSet) -> NodeSet:
        return self.union(other)

    def __and__(self, other: NodeSet) -> NodeSet:
        return self.intersection(other)

    def __repr__(self) -> str:
        return f"NodeSet({sorted(self._nodes)})"

    def add(self, node: Node) -> None:
        self._nodes[node.id] = node

    def remove(self, node: Node) -> None:
        """Remove ``node`` if present."""
        self._nodes.pop(node.id, None)

    def has(self, node: Node) -> bool:
        return node.id in self._nodes

    def copy(self) -> NodeSet:
        result = NodeSet()
        result._nodes = dict(self._nodes)
        return result

    def union(self, other: NodeSet) -> NodeSet:
        """Return a new set holding the members of both sets."""
        result = self.copy()
        result._nodes.update(other._nodes)
        return result

    def intersection(self, other: NodeSet) -> NodeSet:
        """Return a new set holding the members present in both sets."""
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        result = NodeSet()
        result._nodes = {k: v for k, v in small._nodes.items() if k in large._nodes}
        return result

    def ids(self) -> List[NodeID]:
        """Return member ids in ascending order."""
        return sorted(self._nodes)

    def sorted(self) -> List[Node]:
        """Return members ordered by id."""
        return [self._nodes[k] for k in sorted(self._nodes)]

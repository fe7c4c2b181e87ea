"""Disjoint-set forest (union-find) over node ids.

Union by rank with path compression gives near-constant amortized cost for
``find`` and ``union``. Sets are created explicitly with ``make_set``; asking
about an id that was never added is an error.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from graphsearch.graph.base import NodeID


class DisjointSet:
    """Partition of node ids into disjoint sets.

    Example:
        >>> ds = DisjointSet([1, 2, 3])
        >>> ds.union(1, 2)
        1
        >>> ds.connected(2, 1)
        True
        >>> ds.connected(1, 3)
        False
    """

    def __init__(self, ids: Iterable[NodeID] = ()) -> None:
        self._parent: Dict[NodeID, NodeID] = {}
        self._rank: Dict[NodeID, int] = {}
        for node_id in ids:
            self.make_set(node_id)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, node_id: NodeID) -> bool:
        return node_id in self._parent

    def make_set(self, node_id: NodeID) -> None:
        """Add ``node_id`` as a singleton set. Existing members are left alone."""
        if node_id not in self._parent:
            self._parent[node_id] = node_id
            self._rank[node_id] = 0

    def find(self, node_id: NodeID) -> NodeID:
        """Return the representative of the set containing ``node_id``.

        Raises:
            KeyError: If ``node_id`` was never added.
        """
        parent = self._parent
        root = node_id
        while parent[root] != root:
            root = parent[root]

        # Path compression
        current = node_id
        while parent[current] != root:
            parent[current], current = root, parent[current]

        return root

    def union(self, x: NodeID, y: NodeID) -> NodeID:
        """Merge the sets containing ``x`` and ``y``.

        Returns:
            The representative of the merged set.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return root_x

        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return root_x

    def connected(self, x: NodeID, y: NodeID) -> bool:
        """Check whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def sets(self) -> List[List[NodeID]]:
        """Return every set as a list of ids, in first-seen order."""
        groups: Dict[NodeID, List[NodeID]] = {}
        for node_id in self._parent:
            groups.setdefault(self.find(node_id), []).append(node_id)
        return list(groups.values())

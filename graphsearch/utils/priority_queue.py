"""Binary min-heap with decrease-key, addressed by node id.

``heapq`` cannot lower the priority of an entry in place, so this queue keeps
its own heap array plus a map from node id to heap slot. The sift routines
mirror ``heapq._siftdown``/``heapq._siftup`` while keeping that map current.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from graphsearch.graph.base import Node, NodeID


class PriorityQueue:
    """Min-priority queue of nodes supporting ``decrease``.

    Each node may be queued at most once. Ties between equal priorities are
    broken by heap position, not insertion order.
    """

    __slots__ = ("_heap", "_index")

    def __init__(self) -> None:
        self._heap: List[Tuple[float, Node]] = []
        self._index: Dict[NodeID, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, node: Node) -> bool:
        return node.id in self._index

    def priority(self, node: Node) -> Optional[float]:
        """Return the queued priority of ``node``, or None if it is not queued."""
        pos = self._index.get(node.id)
        if pos is None:
            return None
        return self._heap[pos][0]

    def push(self, node: Node, priority: float) -> None:
        """Queue ``node`` with ``priority``.

        Raises:
            ValueError: If the node is already queued; use ``decrease`` instead.
        """
        if node.id in self._index:
            raise ValueError(f"Node '{node.id}' is already queued.")
        self._heap.append((priority, node))
        self._index[node.id] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Tuple[Node, float]:
        """Remove and return the ``(node, priority)`` with the lowest priority.

        Raises:
            IndexError: If the queue is empty. Callers are expected to check
                ``len()`` first; an empty pop is a bookkeeping bug.
        """
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        last = self._heap.pop()
        if not self._heap:
            del self._index[last[1].id]
            return last[1], last[0]
        priority, node = self._heap[0]
        del self._index[node.id]
        self._heap[0] = last
        self._index[last[1].id] = 0
        self._sift_down(0)
        return node, priority

    def decrease(self, node: Node, priority: float) -> bool:
        """Lower the priority of a queued node.

        Args:
            node: A node currently in the queue.
            priority: The new priority.

        Returns:
            True if the priority was lowered, False if ``priority`` is not
            lower than the current one (the queue is left unchanged).

        Raises:
            KeyError: If the node is not queued.
        """
        pos = self._index.get(node.id)
        if pos is None:
            raise KeyError(f"Node '{node.id}' is not queued.")
        if priority >= self._heap[pos][0]:
            return False
        self._heap[pos] = (priority, self._heap[pos][1])
        self._sift_up(pos)
        return True

    def _place(self, pos: int, item: Tuple[float, Node]) -> None:
        self._heap[pos] = item
        self._index[item[1].id] = pos

    def _sift_up(self, pos: int) -> None:
        heap = self._heap
        item = heap[pos]
        while pos > 0:
            parent = (pos - 1) >> 1
            if item[0] < heap[parent][0]:
                self._place(pos, heap[parent])
                pos = parent
                continue
            break
        self._place(pos, item)

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        end = len(heap)
        item = heap[pos]
        child = 2 * pos + 1
        while child < end:
            right = child + 1
            if right < end and heap[right][0] < heap[child][0]:
                child = right
            if heap[child][0] < item[0]:
                self._place(pos, heap[child])
                pos = child
                child = 2 * pos + 1
            else:
                break
        self._place(pos, item)

"""Strongly connected components, topological sort and connected components.

``tarjan_scc`` is the classic recursive low-link algorithm. Recursion depth
grows with the longest chain of unvisited successors, so very deep graphs can
exceed the interpreter recursion limit; callers handling such graphs must
raise the limit or split the input.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Set

from graphsearch.algorithms.traverse import DepthFirst
from graphsearch.config import SEARCH_CONFIG, SearchConfig
from graphsearch.exceptions import Unorderable
from graphsearch.graph.base import DirectedGraph, Graph, Node, NodeID


class _Tarjan:
    """Working state of a single ``tarjan_scc`` call."""

    def __init__(self, successors: Callable[[Node], List[Node]]) -> None:
        self.successors = successors
        self.index = 0
        self.index_table: Dict[NodeID, int] = {}
        self.low_link: Dict[NodeID, int] = {}
        self.on_stack: Set[NodeID] = set()
        self.stack: List[Node] = []
        self.sccs: List[List[Node]] = []

    def strongconnect(self, v: Node) -> None:
        v_id = v.id

        # Smallest unused discovery index
        self.index += 1
        self.index_table[v_id] = self.index
        self.low_link[v_id] = self.index
        self.stack.append(v)
        self.on_stack.add(v_id)

        for w in self.successors(v):
            w_id = w.id
            if w_id not in self.index_table:
                self.strongconnect(w)
                self.low_link[v_id] = min(self.low_link[v_id], self.low_link[w_id])
            elif w_id in self.on_stack:
                # w is on the stack, hence in the current component
                self.low_link[v_id] = min(self.low_link[v_id], self.index_table[w_id])

        # v is a root node: pop the stack and emit a component
        if self.low_link[v_id] == self.index_table[v_id]:
            scc: List[Node] = []
            while True:
                w = self.stack.pop()
                self.on_stack.discard(w.id)
                scc.append(w)
                if w.id == v_id:
                    break
            self.sccs.append(scc)


def tarjan_scc(graph: DirectedGraph) -> List[List[Node]]:
    """Return the strongly connected components of ``graph``.

    A strongly connected component is a maximal set of nodes in which every
    node can reach every other. A directed graph whose component count equals
    its node count is acyclic, ignoring self loops.

    Args:
        graph: Directed graph; successors define reachability.

    Returns:
        Components in reverse topological order of the condensation DAG.
        Every node appears in exactly one component.
    """
    t = _Tarjan(graph.successors)
    for v in graph.node_list():
        if v.id not in t.index_table:
            t.strongconnect(v)
    return t.sccs


def topological_sort(
    graph: DirectedGraph,
    config: Optional[SearchConfig] = None,
) -> List[Node]:
    """Return the nodes of ``graph`` ordered so every edge points forward.

    Args:
        graph: Directed graph to sort.
        config: Optional configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        Nodes in ``from -> to`` order.

    Raises:
        Unorderable: If the graph has cycles. The exception lists each cyclic
            component (members sorted by id) and carries in ``sorted`` the
            ordering of the remaining nodes, with ``None`` marking where each
            cyclic component sits.
    """
    config = config or SEARCH_CONFIG
    sccs = tarjan_scc(graph)
    sorted_nodes: List[Optional[Node]] = []
    cyclic: List[List[Node]] = []
    for scc in sccs:
        if len(scc) != 1:
            cyclic.append(sorted(scc, key=lambda n: n.id))
            sorted_nodes.append(None)
            continue
        sorted_nodes.append(scc[0])
    sorted_nodes.reverse()
    if cyclic:
        cyclic.reverse()
        raise Unorderable(cyclic, sorted_nodes, max_nodes=config.unorderable_max_nodes)
    return [n for n in sorted_nodes if n is not None]


def connected_components(graph: Graph) -> List[List[Node]]:
    """Return the connected components of ``graph``, treating edges as undirected.

    Args:
        graph: Any graph; ``neighbors`` supplies the undirected view.

    Returns:
        One list of nodes per component, in depth-first visit order.
    """
    components: List[List[Node]] = []
    current: List[Node] = []

    def after() -> None:
        components.append(list(current))
        current.clear()

    DepthFirst().walk_all(graph, after=after, during=current.append)
    return components

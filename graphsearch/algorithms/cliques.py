"""Degeneracy ordering and maximal clique enumeration for undirected graphs.

``vertex_ordering`` repeatedly removes a node of minimum residual degree,
keeping nodes in buckets indexed by that degree. ``bron_kerbosch`` enumerates
maximal cliques with the pivoting Bron-Kerbosch algorithm, seeding the
top-level calls in degeneracy order to bound the branching.

Both treat edges as undirected (``neighbors``) and ignore self loops.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from graphsearch.config import SEARCH_CONFIG, SearchConfig
from graphsearch.graph.base import Graph, Node, NodeID
from graphsearch.logging import get_logger
from graphsearch.utils.node_set import NodeSet

_logger = get_logger(__name__)


def _neighbor_set(graph: Graph, node: Node) -> NodeSet:
    return NodeSet(n for n in graph.neighbors(node) if n.id != node.id)


def vertex_ordering(graph: Graph) -> Tuple[List[Node], List[List[Node]]]:
    """Return the degeneracy ordering and k-shells of ``graph``.

    Args:
        graph: Undirected view of the graph.

    Returns:
        ``(order, cores)``. ``order`` is the reverse of the elimination order,
        so every node has at most ``k`` neighbors earlier in it, ``k`` being
        the degeneracy. ``cores[k]`` lists the nodes whose core number is
        ``k``; nodes with core number at least ``k`` form the k-core and
        occupy a prefix of ``order``.
    """
    nodes = graph.node_list()

    # d_v: neighbors of v not yet removed. Initially the degree.
    residual: Dict[NodeID, int] = {}
    neighbours: Dict[NodeID, List[Node]] = {}
    max_degree = 0
    for n in nodes:
        adj = [m for m in graph.neighbors(n) if m.id != n.id]
        neighbours[n.id] = adj
        residual[n.id] = len(adj)
        max_degree = max(max_degree, len(adj))

    # buckets[i] holds the nodes not yet removed whose residual degree is i.
    buckets: List[Dict[NodeID, Node]] = [{} for _ in range(max_degree + 1)]
    for n in nodes:
        buckets[residual[n.id]][n.id] = n

    removed: List[Node] = []
    shell_sizes = [0]
    k = 0
    for _ in range(len(nodes)):
        i = next(i for i, bucket in enumerate(buckets) if bucket)

        if i > k:
            k = i
            shell_sizes.extend([0] * (k - len(shell_sizes) + 1))

        _, v = buckets[i].popitem()
        removed.append(v)
        shell_sizes[k] += 1
        del residual[v.id]

        for w in neighbours[v.id]:
            dw = residual.get(w.id)
            if dw is None:
                continue
            del buckets[dw][w.id]
            buckets[dw - 1][w.id] = w
            residual[w.id] = dw - 1

    removed.reverse()
    cores: List[List[Node]] = []
    offset = len(removed)
    for size in shell_sizes:
        cores.append(removed[offset - size : offset])
        offset -= size
    return removed, cores


class _BronKerbosch:
    """Accumulator threaded through the recursive clique search."""

    def __init__(self, graph: Graph, max_coverage_pivot: bool) -> None:
        self.graph = graph
        self.max_coverage_pivot = max_coverage_pivot
        self.cliques: List[List[Node]] = []

    def maximal_clique_pivot(self, r: List[Node], p: NodeSet, x: NodeSet) -> None:
        if not p and not x:
            self.cliques.append(r)
            return

        pivot_neighbours = self.choose_pivot_from(p, x)
        for v in p:
            if v in pivot_neighbours:
                continue
            nv = _neighbor_set(self.graph, v)
            self.maximal_clique_pivot(r + [v], p & nv, x & nv)
            p.remove(v)
            x.add(v)

    def choose_pivot_from(self, p: NodeSet, x: NodeSet) -> NodeSet:
        """Return the neighbour set of a pivot chosen from ``p | x``.

        Raises:
            RuntimeError: If both sets are empty; callers only ask for a
                pivot when at least one of them is not.
        """
        if not self.max_coverage_pivot:
            for n in p:
                return _neighbor_set(self.graph, n)
            for n in x:
                return _neighbor_set(self.graph, n)
            raise RuntimeError("bron-kerbosch: empty pivot candidate set")

        # Tomita-Tanaka-Takahashi: maximise |p & neighbours(u)|.
        best = -1
        best_neighbours: Optional[NodeSet] = None
        for candidates in (p, x):
            for u in candidates:
                nu = _neighbor_set(self.graph, u)
                if len(nu) <= best:
                    continue
                coverage = len(p & nu)
                if coverage > best:
                    best = coverage
                    best_neighbours = nu
        if best_neighbours is None:
            raise RuntimeError("bron-kerbosch: empty pivot candidate set")
        return best_neighbours


def bron_kerbosch(
    graph: Graph,
    config: Optional[SearchConfig] = None,
) -> List[List[Node]]:
    """Return the maximal cliques of the undirected graph ``graph``.

    Args:
        graph: Undirected view of the graph.
        config: Optional configuration; ``max_coverage_pivot`` selects the
            pivot strategy. Defaults to ``SEARCH_CONFIG``.

    Returns:
        Every maximal clique exactly once. Isolated nodes form singleton
        cliques.

    Notes:
        The search recurses once per clique member, so depth is bounded by
        the size of the largest clique plus one.
    """
    config = config or SEARCH_CONFIG
    bk = _BronKerbosch(graph, config.max_coverage_pivot)

    p = NodeSet(graph.node_list())
    x = NodeSet()
    order, _ = vertex_ordering(graph)
    for v in order:
        nv = _neighbor_set(graph, v)
        bk.maximal_clique_pivot([v], p & nv, x & nv)
        p.remove(v)
        x.add(v)

    _logger.debug("Found %d maximal cliques", len(bk.cliques))
    return bk.cliques

"""Dominator and post-dominator sets by fixed-point iteration.

Node ``a`` dominates ``b`` when every path from the start to ``b`` passes
through ``a``; ``a`` post-dominates ``b`` when every path from ``b`` to the end
passes through ``a``. The full sets are returned; strict or immediate
dominators are not derived.

Starting from ``{start}`` for the start node and the universal set for every
other node, each pass recomputes ``{n} | intersection(dom(p) for p in preds(n))``
until a full pass changes nothing. Sets only shrink, so iteration terminates.

A node other than the start with no predecessors is skipped and keeps the
universal set: it is unreachable from the start and vacuously dominated by
every node. Post-dominators mirror this for nodes without successors.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from graphsearch.algorithms.base import setup_funcs
from graphsearch.graph.base import Graph, Node, NodeID
from graphsearch.logging import get_logger
from graphsearch.utils.node_set import NodeSet

_logger = get_logger(__name__)

DominatorMap = Dict[NodeID, NodeSet]


def _fixed_point(
    root: Node,
    nodes: List[Node],
    incoming: Callable[[Node], List[Node]],
) -> DominatorMap:
    all_nodes = NodeSet(nodes)
    dom: DominatorMap = {}
    for node in nodes:
        dom[node.id] = NodeSet([root]) if node.id == root.id else all_nodes.copy()

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        for node in nodes:
            if node.id == root.id:
                continue
            preds = incoming(node)
            if not preds:
                continue
            common = dom[preds[0].id].copy()
            for pred in preds[1:]:
                common = common & dom[pred.id]

            new = NodeSet([node]) | common
            if new != dom[node.id]:
                dom[node.id] = new
                changed = True

    _logger.debug("Dominator sets converged after %d passes", passes)
    return dom


def dominators(start: Node, graph: Graph) -> DominatorMap:
    """Return the dominator set of every node with respect to ``start``.

    Args:
        start: Entry node.
        graph: Graph to analyze; predecessors are used for directed graphs and
            neighbors otherwise.

    Returns:
        Mapping of node id to the set of nodes dominating it (itself included).
    """
    funcs = setup_funcs(graph)
    return _fixed_point(start, graph.node_list(), funcs.predecessors)


def post_dominators(end: Node, graph: Graph) -> DominatorMap:
    """Return the post-dominator set of every node with respect to ``end``.

    Args:
        end: Exit node.
        graph: Graph to analyze; successors are used for directed graphs and
            neighbors otherwise.

    Returns:
        Mapping of node id to the set of nodes post-dominating it (itself
        included).
    """
    funcs = setup_funcs(graph)
    return _fixed_point(end, graph.node_list(), funcs.successors)

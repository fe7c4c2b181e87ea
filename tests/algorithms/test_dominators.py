import random

import networkx as nx
import pytest

from graphsearch.algorithms.dominators import dominators, post_dominators
from graphsearch.graph.base import Edge, Node
from graphsearch.graph.concrete import DiGraph

from tests.algorithms.sample_graphs import build_digraph, build_graph


def as_ids(dom):
    return {node_id: s.ids() for node_id, s in dom.items()}


class TestDominators:
    def test_control_flow(self, control_flow):
        dom = dominators(Node(0), control_flow)

        assert as_ids(dom) == {
            0: [0],
            1: [0, 1],
            2: [0, 1, 2],
            3: [0, 1, 3],
            4: [0, 1, 4],
            5: [0, 1, 4, 5],
            # No predecessors: unreachable, keeps the universal set
            6: [0, 1, 2, 3, 4, 5, 6],
        }

    def test_loop(self):
        g = build_digraph([(0, 1, 1), (1, 2, 1), (2, 1, 1), (2, 3, 1)])
        dom = dominators(Node(0), g)

        assert as_ids(dom) == {0: [0], 1: [0, 1], 2: [0, 1, 2], 3: [0, 1, 2, 3]}

    def test_every_node_dominates_itself(self, control_flow):
        dom = dominators(Node(0), control_flow)

        assert all(dom[n.id].has(n) for n in control_flow.node_list())

    def test_undirected_graph_uses_neighbors(self):
        # Path 0 - 1 - 2
        g = build_graph([(0, 1, 1), (1, 2, 1)])
        dom = dominators(Node(0), g)

        assert as_ids(dom) == {0: [0], 1: [0, 1], 2: [0, 1, 2]}

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_matches_networkx_idom_chains(self, seed):
        rng = random.Random(seed)
        g = DiGraph()
        for i in range(20):
            g.add_node(Node(i))
        for _ in range(35):
            g.add_directed_edge(Edge(Node(rng.randrange(20)), Node(rng.randrange(20))))

        dom = dominators(Node(0), g)
        idom = nx.immediate_dominators(g.to_networkx(), 0)

        # Only nodes reachable from the start have immediate dominators.
        for node_id in set(idom) | {0}:
            chain = {node_id}
            current = node_id
            while current != 0:
                current = idom[current]
                chain.add(current)
            assert dom[node_id].ids() == sorted(chain)


class TestPostDominators:
    def test_control_flow(self, control_flow):
        pdom = post_dominators(Node(5), control_flow)

        assert as_ids(pdom) == {
            0: [0, 1, 4, 5],
            1: [1, 4, 5],
            2: [2, 4, 5],
            3: [3, 4, 5],
            4: [4, 5],
            5: [5],
            6: [3, 4, 5, 6],
        }

    def test_dead_end_keeps_universal_set(self):
        # 2 never reaches the exit 3
        g = build_digraph([(0, 1, 1), (1, 3, 1), (0, 2, 1)])
        pdom = post_dominators(Node(3), g)

        assert pdom[2].ids() == [0, 1, 2, 3]
        assert pdom[1].ids() == [1, 3]
        # The dead end's universal set leaves 1's set as the intersection
        assert pdom[0].ids() == [0, 1, 3]

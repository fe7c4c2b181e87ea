import math

import networkx as nx
import pytest

from graphsearch.graph.base import (
    Coster,
    DirectedGraph,
    Edge,
    EdgeListGraph,
    Graph,
    MutableDirectedGraph,
    MutableGraph,
    Node,
)
from graphsearch.graph.concrete import DiGraph, UndirectedGraph


class TestProtocols:
    def test_undirected_graph_capabilities(self):
        g = UndirectedGraph()

        assert isinstance(g, Graph)
        assert isinstance(g, EdgeListGraph)
        assert isinstance(g, Coster)
        assert isinstance(g, MutableGraph)
        assert not isinstance(g, DirectedGraph)

    def test_digraph_capabilities(self):
        g = DiGraph()

        assert isinstance(g, DirectedGraph)
        assert isinstance(g, EdgeListGraph)
        assert isinstance(g, Coster)
        assert isinstance(g, MutableDirectedGraph)


class TestUndirectedGraph:
    def test_add_node_and_duplicate(self):
        g = UndirectedGraph()
        g.add_node(Node(1))

        assert g.node_exists(Node(1))
        assert Node(1) in g
        assert len(g) == 1
        with pytest.raises(ValueError, match="already exists"):
            g.add_node(Node(1))

    def test_edge_is_symmetric(self):
        g = UndirectedGraph()
        g.add_undirected_edge(Edge(Node(1), Node(2)), 3.5)

        assert g.neighbors(Node(1)) == [Node(2)]
        assert g.neighbors(Node(2)) == [Node(1)]
        assert g.edge_between(Node(2), Node(1)) == Edge(Node(2), Node(1))
        assert g.cost(Edge(Node(2), Node(1))) == 3.5
        assert g.has_edge(Node(1), Node(2))

    def test_missing_edge_costs_inf(self):
        g = UndirectedGraph()
        g.add_node(Node(1))
        g.add_node(Node(2))

        assert g.edge_between(Node(1), Node(2)) is None
        assert g.cost(None) == math.inf
        assert g.cost(Edge(Node(1), Node(2))) == math.inf

    def test_neighbors_of_missing_node(self):
        assert UndirectedGraph().neighbors(Node(5)) == []

    def test_remove_edge_and_node(self):
        g = UndirectedGraph()
        g.add_undirected_edge(Edge(Node(1), Node(2)))
        g.add_undirected_edge(Edge(Node(2), Node(3)))

        g.remove_undirected_edge(Edge(Node(2), Node(1)))
        assert not g.has_edge(Node(1), Node(2))
        with pytest.raises(ValueError):
            g.remove_undirected_edge(Edge(Node(1), Node(2)))

        g.remove_node(Node(3))
        assert g.neighbors(Node(2)) == []
        with pytest.raises(ValueError):
            g.remove_node(Node(3))

    def test_new_node_skips_used_ids(self):
        g = UndirectedGraph()
        g.add_node(Node(0))
        g.add_node(Node(1))

        fresh = g.new_node()
        assert fresh == Node(2)
        assert not g.node_exists(fresh)

    def test_to_networkx(self):
        g = UndirectedGraph()
        g.add_undirected_edge(Edge(Node(1), Node(2)), 4.0)
        g.add_node(Node(3))

        nxg = g.to_networkx()
        assert isinstance(nxg, nx.Graph)
        assert not nxg.is_directed()
        assert set(nxg.nodes) == {1, 2, 3}
        assert nxg[2][1]["cost"] == 4.0


class TestDiGraph:
    def test_direction(self):
        g = DiGraph()
        g.add_directed_edge(Edge(Node(1), Node(2)), 2.0)

        assert g.successors(Node(1)) == [Node(2)]
        assert g.successors(Node(2)) == []
        assert g.predecessors(Node(2)) == [Node(1)]
        assert g.edge_to(Node(1), Node(2)) == Edge(Node(1), Node(2))
        assert g.edge_to(Node(2), Node(1)) is None

    def test_undirected_view(self):
        g = DiGraph()
        g.add_directed_edge(Edge(Node(1), Node(2)), 2.0)
        g.add_directed_edge(Edge(Node(3), Node(1)), 1.0)
        g.add_directed_edge(Edge(Node(2), Node(1)), 7.0)

        assert sorted(n.id for n in g.neighbors(Node(1))) == [2, 3]
        # Reports the edge in its stored orientation
        assert g.edge_between(Node(1), Node(3)) == Edge(Node(3), Node(1))
        assert g.edge_between(Node(1), Node(4)) is None

    def test_costs_per_direction(self):
        g = DiGraph()
        g.add_directed_edge(Edge(Node(1), Node(2)), 2.0)
        g.add_directed_edge(Edge(Node(2), Node(1)), 7.0)

        assert g.cost(Edge(Node(1), Node(2))) == 2.0
        assert g.cost(Edge(Node(2), Node(1))) == 7.0

    def test_edge_list_and_remove(self):
        g = DiGraph()
        g.add_directed_edge(Edge(Node(1), Node(2)))
        g.add_directed_edge(Edge(Node(2), Node(3)))

        assert sorted((e.src.id, e.dst.id) for e in g.edge_list()) == [(1, 2), (2, 3)]

        g.remove_directed_edge(Edge(Node(1), Node(2)))
        assert g.edge_list() == [Edge(Node(2), Node(3))]
        with pytest.raises(ValueError):
            g.remove_directed_edge(Edge(Node(2), Node(1)))

    def test_to_networkx_is_directed(self):
        g = DiGraph()
        g.add_directed_edge(Edge(Node(1), Node(2)), 3.0)

        nxg = g.to_networkx()
        assert nxg.is_directed()
        assert nxg.has_edge(1, 2) and not nxg.has_edge(2, 1)

import random
from typing import Iterable, Tuple

import pytest

from graphsearch.graph.base import Edge, Node
from graphsearch.graph.concrete import DiGraph, UndirectedGraph

def build_digraph(edges: Iterable[Tuple[int, int, float]], nodes=()) -> DiGraph:
    g = DiGraph()
    for n in nodes:
        g.add_node(Node(n))
    for u, v, cost in edges:
        g.add_directed_edge(Edge(Node(u), Node(v)), cost)
    return g


def build_graph(edges: Iterable[Tuple[int, int, float]], nodes=()) -> UndirectedGraph:
    g = UndirectedGraph()
    for n in nodes:
        g.add_node(Node(n))
    for u, v, cost in edges:
        g.add_undirected_edge(Edge(Node(u), Node(v)), cost)
    return g


def random_digraph(seed: int, n: int = 25, p: float = 0.15) -> DiGraph:
    """Directed graph on nodes 0..n-1 with integer costs in [1, 9]."""
    rng = random.Random(seed)
    g = DiGraph()
    for i in range(n):
        g.add_node(Node(i))
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < p:
                g.add_directed_edge(Edge(Node(u), Node(v)), float(rng.randint(1, 9)))
    return g


@pytest.fixture
def diamond1():
    # Cost:
    #       [1]        [5]
    #   A────────►B─────────►D
    #   │         │          ▲
    #   │[4]      │[2]       │[1]
    #   │         ▼          │
    #   └────────►C──────────┘
    #
    # A=0, B=1, C=2, D=3
    return build_digraph(
        [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1)],
    )


@pytest.fixture
def cycle_with_tail():
    #   D───►A───►B
    #        ▲    │
    #        │    ▼
    #        └────C
    #
    # A=0, B=1, C=2, D=3
    return build_digraph([(0, 1, 1), (1, 2, 1), (2, 0, 1), (3, 0, 1)])


@pytest.fixture
def dag1():
    #   A───►B───►D
    #   │         ▲
    #   ▼         │
    #   C─────────┘
    #   │
    #   ▼
    #   E          F (isolated)
    return build_digraph(
        [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1), (2, 4, 1)],
        nodes=range(6),
    )


@pytest.fixture
def square_equal():
    # Two equal-cost routes A->C:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    #
    # A=0, B=1, C=2, D=3
    return build_digraph([(0, 1, 1), (1, 2, 1), (0, 3, 1), (3, 2, 1)])


@pytest.fixture
def mst_graph():
    # Undirected, minimum spanning tree cost 39:
    #
    #   A ───7─── B ───8─── C
    #   │       ╱   ╲       │
    #   5     9       7     5
    #   │   ╱           ╲   │
    #   D ──────15──────── E
    #    ╲               ╱ │
    #     6            8   9
    #      ╲         ╱     │
    #       F ──────11──── G
    #
    # A=0 B=1 C=2 D=3 E=4 F=5 G=6
    return build_graph(
        [
            (0, 1, 7),
            (0, 3, 5),
            (1, 2, 8),
            (1, 3, 9),
            (1, 4, 7),
            (2, 4, 5),
            (3, 4, 15),
            (3, 5, 6),
            (4, 5, 8),
            (4, 6, 9),
            (5, 6, 11),
        ]
    )


@pytest.fixture
def two_cliques():
    # K4 on {0,1,2,3} sharing node 3 with triangle {3,4,5}; 6 is isolated.
    return build_graph(
        [
            (0, 1, 1),
            (0, 2, 1),
            (0, 3, 1),
            (1, 2, 1),
            (1, 3, 1),
            (2, 3, 1),
            (3, 4, 1),
            (3, 5, 1),
            (4, 5, 1),
        ],
        nodes=[6],
    )


@pytest.fixture
def control_flow():
    # Entry 0, exit 5:
    #
    #   0 ──► 1 ──► 2 ──► 4 ──► 5
    #         │           ▲
    #         └───► 3 ────┘
    #               ▲
    #               │
    #               6 (no predecessors)
    return build_digraph(
        [(0, 1, 1), (1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1), (4, 5, 1), (6, 3, 1)]
    )

"""Shared pytest fixtures: small graphs with hand-checked shortest distances."""

import pytest

from handlegraph.graph.adjacency import AdjacencyListGraph
from handlegraph.graph.weighted_graph import WeightedGraph
from handlegraph.types import Directedness

# Cost:
#  0 --(2)--> 1 --(8)--> 3 --(3)--> 4
#  |          ^          ^
#  |         (3)         |
#  |          |          |
#  |---(1)--> 2 --(20)---|          5
CHAIN6_EDGES = [
    (0, 1, 2),
    (0, 2, 1),
    (2, 1, 3),
    (2, 3, 20),
    (1, 3, 8),
    (3, 4, 3),
]
CHAIN6_DIST = [0, 2, 1, 10, 13, None]


@pytest.fixture
def chain6():
    g = AdjacencyListGraph.with_nodes(6)
    for u, v, w in CHAIN6_EDGES:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def chain6_weighted():
    g = WeightedGraph()
    for name in "ABCDEF":
        g.add_node(name)
    for u, v, w in CHAIN6_EDGES:
        g.add_edge(w, u, v)
    return g


@pytest.fixture
def siblings():
    # Cost:
    #        [5]
    #   ┌──────────►1────┐[1]
    #   │                ▼
    #   0                3
    #   │                ▲
    #   └──────────►2────┘[4]
    #        [5]
    g = AdjacencyListGraph.with_nodes(4)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 2, 5)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 4)
    return g


@pytest.fixture
def triangle_undirected():
    # Cost:
    #      [1]       [1]
    #   A◄──────►B◄──────►C
    #   ▲                 ▲
    #   └───────[5]───────┘
    g = WeightedGraph(Directedness.UNDIRECTED)
    a, b, c = g.add_node("A"), g.add_node("B"), g.add_node("C")
    g.add_edge(1, a, b)
    g.add_edge(1, b, c)
    g.add_edge(5, a, c)
    return g


@pytest.fixture
def chain6_dist():
    return list(CHAIN6_DIST)

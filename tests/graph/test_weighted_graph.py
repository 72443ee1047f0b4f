import pytest

from handlegraph.graph.adjacency import AdjacencyGraph, Arc
from handlegraph.graph.weighted_graph import Edge, Node, WeightedGraph
from handlegraph.types import Directedness


def build_square(directedness=Directedness.DIRECTED):
    #  0 ──► 1
    #  │     │
    #  ▼     ▼
    #  2 ──► 3
    g = WeightedGraph(directedness)
    for name in "ABCD":
        g.add_node(name)
    g.add_edge(1, 0, 1)
    g.add_edge(2, 0, 2)
    g.add_edge(3, 1, 3)
    g.add_edge(4, 2, 3)
    return g


def test_init_empty_graph():
    g = WeightedGraph()
    assert g.node_count() == 0
    assert g.edge_count() == 0
    assert g.is_directed
    assert g.directedness is Directedness.DIRECTED
    assert list(g.nodes()) == []


def test_add_node_increments_count():
    g = WeightedGraph()
    for i, name in enumerate("ABC"):
        before = g.node_count()
        assert g.add_node(name) == i
        assert g.node_count() == before + 1
    assert g.node(1) == Node(1, "B")
    assert g.node_weight(2) == "C"


def test_remove_node_decrements_count_and_frees_handle():
    g = build_square()
    assert g.remove_node(1) == "B"
    assert g.node_count() == 3
    assert not g.has_node(1)
    assert g.add_node("E") == 1
    assert g.node_weight(1) == "E"


def test_remove_node_missing():
    g = WeightedGraph()
    g.add_node("A")
    assert g.remove_node(7) is None
    assert g.node_count() == 1


def test_non_int_handles_are_absent():
    g = build_square()
    assert g.remove_node(1.0) is None
    assert g.remove_node(True) is None
    assert g.node("x") is None
    assert g.node_weight(2.0) is None
    assert g.remove_edge("x") is None
    assert g.edge_weight(2.5) is None
    assert g.edge_endpoints(0.0) is None
    assert g.incident_edges(1.0) == []
    assert not g.has_node("A")
    assert g.find_edges(0.0, 1) == []
    assert g.add_edge(9, 0, 1.0) is None
    assert (g.node_count(), g.edge_count()) == (4, 4)


def test_remove_node_cascades_edges():
    g = build_square()
    g.add_edge(9, 0, 0)
    assert g.edge_count() == 5
    g.remove_node(0)
    assert g.edge_count() == 2
    for edge in g.edges():
        assert edge.head != 0 and edge.tail != 0
    assert g.incident_edges(0) == []
    # Surviving endpoints no longer list the removed edges
    assert g.incident_edges(1) == [2]
    assert g.incident_edges(2) == [3]


def test_cascade_does_not_resurrect_on_handle_reuse():
    g = build_square()
    g.remove_node(3)
    h = g.add_node("D2")
    assert h == 3
    assert g.find_edges(1, 3) == []
    assert g.incident_edges(3) == []


def test_add_edge_basic():
    g = WeightedGraph()
    a, b = g.add_node("A"), g.add_node("B")
    e = g.add_edge(10, a, b)
    assert e == 0
    assert g.edge(e) == Edge(0, 10, a, b)
    assert g.edge_weight(e) == 10
    assert g.edge_endpoints(e) == (a, b)
    assert g.has_edge(e)


def test_add_edge_invalid_endpoint():
    g = WeightedGraph()
    a = g.add_node("A")
    assert g.add_edge(1, a, 5) is None
    assert g.add_edge(1, 5, a) is None
    assert g.edge_count() == 0

    b = g.add_node("B")
    g.remove_node(b)
    assert g.add_edge(1, a, b) is None
    assert g.edge_count() == 0


def test_self_loop_and_parallel_edges():
    g = WeightedGraph()
    a, b = g.add_node("A"), g.add_node("B")
    loop = g.add_edge(0, a, a)
    e1 = g.add_edge(1, a, b)
    e2 = g.add_edge(2, a, b)
    assert loop is not None
    assert g.find_edges(a, a) == [loop]
    assert g.find_edges(a, b) == [e1, e2]
    assert [arc.target for arc in g.adjacencies(a)] == [a, b, b]


def test_remove_edge():
    g = build_square()
    assert g.remove_edge(0) == 1
    assert g.remove_edge(0) is None
    assert g.edge_count() == 3
    assert g.find_edge(0, 1) is None
    assert g.edge(0) is None
    assert g.edge_endpoints(0) is None


def test_edge_handle_reuse():
    g = build_square()
    g.remove_edge(1)
    assert g.add_edge(7, 3, 0) == 1
    assert g.edge_endpoints(1) == (3, 0)


def test_find_edges_sorted_and_prefix():
    g = WeightedGraph()
    a, b = g.add_node("A"), g.add_node("B")
    handles = [g.add_edge(i, a, b) for i in range(5)]
    g.remove_edge(handles[1])
    g.remove_edge(handles[3])
    reused = g.add_edge(99, a, b)
    found = g.find_edges(a, b)
    assert found == sorted(found)
    assert len(set(found)) == len(found)
    assert reused in found
    for n in range(1, 5):
        assert g.find_n_edges(n, a, b) == found[:n]
    assert g.find_n_edges(0, a, b) == found
    assert g.find_edge(a, b) == found[0]


def test_find_n_edges_negative_limit():
    g = build_square()
    with pytest.raises(ValueError, match="non-negative"):
        g.find_n_edges(-1, 0, 1)


def test_find_edges_missing_nodes():
    g = build_square()
    assert g.find_edges(0, 42) == []
    assert g.find_edge(42, 0) is None


def test_directed_find_is_one_way():
    g = build_square()
    assert g.find_edges(0, 1) == [0]
    assert g.find_edges(1, 0) == []


def test_undirected_find_is_symmetric():
    g = build_square(Directedness.UNDIRECTED)
    assert not g.is_directed
    for head in range(4):
        for tail in range(4):
            assert set(g.find_edges(head, tail)) == set(g.find_edges(tail, head))
    assert g.find_edges(1, 0) == [0]


def test_adjacencies_directed():
    g = build_square()
    assert list(g.adjacencies(0)) == [Arc(1, 1), Arc(2, 2)]
    assert list(g.adjacencies(3)) == []
    assert g.neighbors(0) == [1, 2]


def test_adjacencies_undirected():
    g = build_square(Directedness.UNDIRECTED)
    assert list(g.adjacencies(3)) == [Arc(1, 3), Arc(2, 4)]
    assert g.neighbors(3) == [1, 2]


def test_adjacencies_missing_node():
    g = WeightedGraph()
    with pytest.raises(KeyError, match="does not exist"):
        g.adjacencies(0)
    with pytest.raises(KeyError, match="does not exist"):
        build_square().adjacencies(1.0)


def test_satisfies_adjacency_capability():
    assert isinstance(build_square(), AdjacencyGraph)


def test_is_dense_tracks_gaps():
    g = build_square()
    assert g.is_dense()
    g.remove_node(1)
    assert not g.is_dense()
    g.add_node("B2")
    assert g.is_dense()
    g.remove_node(3)
    assert g.is_dense()


def test_copy_is_independent():
    g = build_square()
    clone = g.copy()
    clone.remove_node(0)
    assert g.node_count() == 4
    assert g.edge_count() == 4
    assert clone.node_count() == 3
    assert clone.edge_count() == 2


def test_clear():
    g = build_square()
    g.clear()
    assert g.node_count() == 0
    assert g.edge_count() == 0
    assert g.add_node("A") == 0


def test_directedness_from_string():
    assert Directedness.from_string("undirected") is Directedness.UNDIRECTED
    with pytest.raises(ValueError, match="Invalid directedness"):
        Directedness.from_string("sideways")


def test_repr():
    assert repr(build_square()) == "WeightedGraph(directed, nodes=4, edges=4)"


def test_copy_preserves_gaps_and_reuse():
    g = build_square()
    g.remove_node(1)
    clone = g.copy()
    assert not clone.is_dense()
    assert clone.add_node("B2") == 1
    assert clone.is_dense()

from digraph import Digraph, DuplicateEdgeError, DuplicateVertexError, UnknownEdgeError, UnknownVertexError
import pytest


def test_empty_graph():
    g = Digraph()
    assert g.vertices() == set()
    assert g.edges() == set()
    assert g.vertex_count() == 0
    assert g.edge_count() == 0
    assert len(g) == 0


def test_add_vertex_round_trip():
    g = Digraph()
    g.add_vertex(-7, {"name": "x"})
    g.add_vertex(100, "y")
    assert g.vertex_info(-7) == {"name": "x"}
    assert g.vertex_info(100) == "y"
    assert g.vertices() == {-7, 100}
    assert -7 in g and 8 not in g


def test_duplicate_vertex_leaves_graph_unchanged():
    g = Digraph()
    g.add_vertex(1, "first")
    with pytest.raises(DuplicateVertexError):
        g.add_vertex(1, "second")
    assert g.vertex_info(1) == "first"
    assert g.vertex_count() == 1


def test_add_edge_and_info(triangle):
    assert triangle.edges() == {(1, 2), (2, 3), (3, 1)}
    assert triangle.edges(1) == {(1, 2)}
    assert triangle.edge_info(2, 3) == 1.0
    assert triangle.has_edge(1, 2)
    assert not triangle.has_edge(2, 1)


def test_add_edge_errors_are_atomic(triangle):
    with pytest.raises(UnknownVertexError):
        triangle.add_edge(9, 1, 0)
    with pytest.raises(UnknownVertexError):
        triangle.add_edge(1, 9, 0)
    with pytest.raises(DuplicateEdgeError):
        triangle.add_edge(1, 2, 99)
    assert triangle.edge_info(1, 2) == 1.0
    assert triangle.edge_count() == 3
    assert triangle.vertices() == {1, 2, 3}


def test_lookup_errors(triangle):
    with pytest.raises(UnknownVertexError):
        triangle.vertex_info(4)
    with pytest.raises(UnknownVertexError):
        triangle.edges(4)
    with pytest.raises(UnknownVertexError):
        triangle.edge_count(4)
    with pytest.raises(UnknownVertexError):
        triangle.edge_info(4, 1)
    with pytest.raises(UnknownEdgeError):
        triangle.edge_info(2, 1)


def test_remove_edge(triangle):
    triangle.remove_edge(3, 1)
    assert triangle.edges() == {(1, 2), (2, 3)}
    with pytest.raises(UnknownEdgeError):
        triangle.remove_edge(3, 1)
    with pytest.raises(UnknownVertexError):
        triangle.remove_edge(8, 1)
    assert triangle.edge_count() == 2


def test_remove_vertex_cascades(weighted):
    before = weighted.edge_count()
    # vertex 3 has incoming 2->3, 1->3 and outgoing 3->4
    weighted.remove_vertex(3)
    assert weighted.edge_count() == before - 3
    assert 3 not in weighted.vertices()
    for (u, v) in weighted.edges():
        assert 3 not in (u, v)
    with pytest.raises(UnknownVertexError):
        weighted.remove_vertex(3)


def test_remove_vertex_with_self_loop():
    g = Digraph()
    g.add_vertex(1, None)
    g.add_vertex(2, None)
    g.add_edge(1, 1, "loop")
    g.add_edge(2, 1, "in")
    g.remove_vertex(1)
    assert g.edge_count() == 0
    assert g.vertices() == {2}


def test_edge_count_per_vertex_is_outgoing_only(weighted):
    assert weighted.edge_count(1) == 2
    assert weighted.edge_count(4) == 0
    assert weighted.edge_count() == sum(weighted.edge_count(v) for v in weighted.vertices())


def test_degrees_sources_and_sinks(weighted):
    assert weighted.out_degree(1) == 2
    assert weighted.in_degree(3) == 2
    assert weighted.successors(1) == [2, 3]
    assert weighted.predecessors(3) == [1, 2]
    assert weighted.get_sources() == [1, 5]
    assert weighted.get_sinks() == [4, 5]


def test_payloads_are_opaque():
    g = Digraph()
    payload = object()
    g.add_vertex(1, payload)
    g.add_vertex(2, None)
    g.add_edge(1, 2, payload)
    assert g.vertex_info(1) is payload
    assert g.edge_info(1, 2) is payload


def test_clear(triangle):
    triangle.clear()
    assert triangle.vertex_count() == 0
    assert triangle.edges() == set()
    triangle.add_vertex(1, "fresh")
    assert triangle.vertex_info(1) == "fresh"

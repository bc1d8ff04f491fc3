from digraph import (
    DigraphException,
    Digraph,
    DuplicateEdgeError,
    DuplicateVertexError,
    ErrorCode,
    UnknownEdgeError,
    UnknownVertexError,
)
import pickle

import pytest


def test_error_codes():
    g = Digraph()
    g.add_vertex(1, None)
    g.add_vertex(2, None)
    g.add_edge(1, 2, None)

    cases = [
        (lambda: g.vertex_info(3), ErrorCode.UNKNOWN_VERTEX),
        (lambda: g.edge_info(2, 1), ErrorCode.UNKNOWN_EDGE),
        (lambda: g.add_vertex(1, None), ErrorCode.DUPLICATE_VERTEX),
        (lambda: g.add_edge(1, 2, None), ErrorCode.DUPLICATE_EDGE),
    ]
    for call, code in cases:
        with pytest.raises(DigraphException) as info:
            call()
        assert info.value.code is code


def test_builtin_bases():
    assert issubclass(UnknownVertexError, KeyError)
    assert issubclass(UnknownEdgeError, KeyError)
    assert issubclass(DuplicateVertexError, ValueError)
    assert issubclass(DuplicateEdgeError, ValueError)


def test_error_attributes_and_message():
    g = Digraph()
    g.add_vertex(1, None)
    with pytest.raises(UnknownVertexError) as info:
        g.add_edge(1, 42, None)
    assert info.value.vertex == 42
    assert str(info.value) == "Vertex 42 does not exist"

    with pytest.raises(UnknownEdgeError) as info:
        g.remove_edge(1, 1)
    assert info.value.edge == (1, 1)
    assert "1 -> 1" in str(info.value)


def test_errors_survive_pickling():
    errors = [
        UnknownVertexError(3),
        UnknownEdgeError(1, 2),
        DuplicateVertexError(-4),
        DuplicateEdgeError(5, 6),
        DigraphException("custom", vertex=1, edge=(1, 2)),
    ]
    for error in errors:
        restored = pickle.loads(pickle.dumps(error))
        assert type(restored) is type(error)
        assert str(restored) == str(error)
        assert restored.code is error.code
        assert restored.vertex == error.vertex
        assert restored.edge == error.edge

    assert str(pickle.loads(pickle.dumps(UnknownVertexError(3)))) == "Vertex 3 does not exist"

"""
Exception family raised by the digraph package.

Every error is a caller precondition violation (a missing or duplicate vertex
or edge). They carry a machine-checkable ``code`` alongside the message.
"""

from enum import Enum
from typing import Optional, Tuple


class ErrorCode(Enum):
    """Kinds of precondition violation."""
    UNKNOWN_VERTEX = "unknown_vertex"
    UNKNOWN_EDGE = "unknown_edge"
    DUPLICATE_VERTEX = "duplicate_vertex"
    DUPLICATE_EDGE = "duplicate_edge"


class DigraphException(Exception):
    """Base class for all digraph errors."""

    code: Optional[ErrorCode] = None

    def __init__(self, message: str, vertex: Optional[int] = None,
                 edge: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.message = message
        self.vertex = vertex
        self.edge = edge

    def _reduce_args(self) -> tuple:
        return (self.message, self.vertex, self.edge)

    def __reduce__(self):
        return (type(self), self._reduce_args())

    def __str__(self) -> str:
        return self.message


class UnknownVertexError(DigraphException, KeyError):
    code = ErrorCode.UNKNOWN_VERTEX

    def __init__(self, vertex: int):
        super().__init__(f"Vertex {vertex!r} does not exist", vertex=vertex)

    def _reduce_args(self) -> tuple:
        return (self.vertex,)


class UnknownEdgeError(DigraphException, KeyError):
    code = ErrorCode.UNKNOWN_EDGE

    def __init__(self, from_vertex: int, to_vertex: int):
        super().__init__(f"Edge {from_vertex!r} -> {to_vertex!r} does not exist",
                         edge=(from_vertex, to_vertex))

    def _reduce_args(self) -> tuple:
        return self.edge


class DuplicateVertexError(DigraphException, ValueError):
    code = ErrorCode.DUPLICATE_VERTEX

    def __init__(self, vertex: int):
        super().__init__(f"Vertex {vertex!r} already exists", vertex=vertex)

    def _reduce_args(self) -> tuple:
        return (self.vertex,)


class DuplicateEdgeError(DigraphException, ValueError):
    code = ErrorCode.DUPLICATE_EDGE

    def __init__(self, from_vertex: int, to_vertex: int):
        super().__init__(f"Edge {from_vertex!r} -> {to_vertex!r} already exists",
                         edge=(from_vertex, to_vertex))

    def _reduce_args(self) -> tuple:
        return self.edge

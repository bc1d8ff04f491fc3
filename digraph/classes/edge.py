"""
Edge record stored by the graph.
"""

import copy
from typing import Any, Tuple


class DigraphEdge:
    """A directed edge between two vertex numbers, with its payload."""

    __slots__ = ('from_vertex', 'to_vertex', 'einfo')

    def __init__(self, from_vertex: int, to_vertex: int, einfo: Any):
        self.from_vertex = from_vertex
        self.to_vertex = to_vertex
        self.einfo = einfo

    @property
    def key(self) -> Tuple[int, int]:
        return (self.from_vertex, self.to_vertex)

    def copy(self) -> 'DigraphEdge':
        return DigraphEdge(self.from_vertex, self.to_vertex, copy.deepcopy(self.einfo))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigraphEdge):
            return NotImplemented
        return self.key == other.key and self.einfo == other.einfo

    def __repr__(self) -> str:
        return f"DigraphEdge({self.from_vertex!r} -> {self.to_vertex!r}, einfo={self.einfo!r})"

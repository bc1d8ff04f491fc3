"""
Vertex record stored by the graph.
"""

import copy
from typing import Any, Dict

from .edge import DigraphEdge


class DigraphVertex:
    """
    A vertex payload together with its outgoing edges.

    Outgoing edges are keyed by destination vertex, which keeps at most one
    edge per ordered pair. There is no incoming-edge index.
    """

    __slots__ = ('vinfo', 'edges')

    def __init__(self, vinfo: Any):
        self.vinfo = vinfo
        self.edges: Dict[int, DigraphEdge] = {}

    def copy(self) -> 'DigraphVertex':
        """Deep copy of the payload and every outgoing edge."""
        duplicate = DigraphVertex(copy.deepcopy(self.vinfo))
        duplicate.edges = {to_vertex: edge.copy() for to_vertex, edge in self.edges.items()}
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigraphVertex):
            return NotImplemented
        return self.vinfo == other.vinfo and self.edges == other.edges

    def __repr__(self) -> str:
        return f"DigraphVertex(vinfo={self.vinfo!r}, out_degree={len(self.edges)})"

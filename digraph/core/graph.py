"""
Core graph store for directed graphs.

This module provides the fundamental adjacency-list structure and its
mutation/query contract without any higher-level analysis.
"""

import logging
from typing import Any, Dict, List, Set, Tuple, Optional

from ..classes.vertex import DigraphVertex
from ..classes.edge import DigraphEdge
from .exceptions import (
    UnknownVertexError,
    UnknownEdgeError,
    DuplicateVertexError,
    DuplicateEdgeError,
)

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Core adjacency-list storage for a directed graph.

    This class owns every vertex and edge. It provides:
    - Vertex and edge insertion/removal with uniqueness checks
    - Payload lookup for vertices and edges
    - Enumeration and counts, overall and per vertex

    Each vertex keeps only its outgoing edges; incoming edges are found by
    scanning every vertex. Every mutation validates before it changes
    anything, so a failed call leaves the store as it was.
    """

    def __init__(self):
        """Initialize an empty store."""
        self.vertex_map: Dict[int, DigraphVertex] = {}

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def _get_vertex(self, vertex: int) -> DigraphVertex:
        try:
            return self.vertex_map[vertex]
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def _get_edge(self, from_vertex: int, to_vertex: int) -> DigraphEdge:
        source = self._get_vertex(from_vertex)
        try:
            return source.edges[to_vertex]
        except KeyError:
            raise UnknownEdgeError(from_vertex, to_vertex) from None

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self.vertex_map

    def has_edge(self, from_vertex: int, to_vertex: int) -> bool:
        source = self.vertex_map.get(from_vertex)
        return source is not None and to_vertex in source.edges

    def vertices(self) -> Set[int]:
        """Get the vertex numbers of every vertex."""
        return set(self.vertex_map)

    def edges(self, vertex: Optional[int] = None) -> Set[Tuple[int, int]]:
        """
        Get (from, to) pairs for edges in the graph.

        Args:
            vertex: If given, only edges outgoing from this vertex are returned

        Returns:
            Set of (from_vertex, to_vertex) pairs

        Raises:
            UnknownVertexError: If ``vertex`` is given and does not exist
        """
        if vertex is not None:
            return {edge.key for edge in self._get_vertex(vertex).edges.values()}
        return {edge.key for record in self.vertex_map.values() for edge in record.edges.values()}

    def vertex_info(self, vertex: int) -> Any:
        return self._get_vertex(vertex).vinfo

    def edge_info(self, from_vertex: int, to_vertex: int) -> Any:
        return self._get_edge(from_vertex, to_vertex).einfo

    def vertex_count(self) -> int:
        return len(self.vertex_map)

    def edge_count(self, vertex: Optional[int] = None) -> int:
        """
        Count edges, overall or outgoing from one vertex.

        Args:
            vertex: If given, count only the edges outgoing from this vertex

        Raises:
            UnknownVertexError: If ``vertex`` is given and does not exist
        """
        if vertex is not None:
            return len(self._get_vertex(vertex).edges)
        return sum(len(record.edges) for record in self.vertex_map.values())

    def successors(self, vertex: int) -> List[int]:
        """Destinations of the outgoing edges of ``vertex``, sorted."""
        return sorted(self._get_vertex(vertex).edges)

    def predecessors(self, vertex: int) -> List[int]:
        """Sources of the incoming edges of ``vertex``, sorted (full scan)."""
        self._get_vertex(vertex)
        return sorted(start_id for start_id, record in self.vertex_map.items()
                      if vertex in record.edges)

    def in_degree(self, vertex: int) -> int:
        return len(self.predecessors(vertex))

    def out_degree(self, vertex: int) -> int:
        return self.edge_count(vertex)

    def get_sources(self) -> List[int]:
        """Get vertices with no incoming edges."""
        targets = {to_vertex for record in self.vertex_map.values() for to_vertex in record.edges}
        return sorted(v for v in self.vertex_map if v not in targets)

    def get_sinks(self) -> List[int]:
        """Get vertices with no outgoing edges."""
        return sorted(v for v, record in self.vertex_map.items() if not record.edges)

    def adjacency(self) -> Dict[int, List[int]]:
        """
        Snapshot of the structure as vertex -> sorted successor list.

        The analysis layer works on this snapshot so it never touches the
        store's records.
        """
        return {vertex: sorted(record.edges) for vertex, record in self.vertex_map.items()}

    def outgoing(self, vertex: int) -> List[DigraphEdge]:
        """Outgoing edge records of ``vertex`` ordered by destination."""
        record = self._get_vertex(vertex)
        return [record.edges[to_vertex] for to_vertex in sorted(record.edges)]

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: int, vinfo: Any) -> None:
        """
        Add a vertex with the given number and payload.

        Raises:
            DuplicateVertexError: If the vertex already exists
        """
        if vertex in self.vertex_map:
            raise DuplicateVertexError(vertex)
        self.vertex_map[vertex] = DigraphVertex(vinfo)
        logger.debug(f"Added vertex {vertex}")

    def add_edge(self, from_vertex: int, to_vertex: int, einfo: Any) -> None:
        """
        Add an edge from ``from_vertex`` to ``to_vertex`` with a payload.

        Both endpoints must already exist; the source is checked first.

        Raises:
            UnknownVertexError: If either endpoint does not exist
            DuplicateEdgeError: If the edge is already present
        """
        source = self._get_vertex(from_vertex)
        if to_vertex not in self.vertex_map:
            raise UnknownVertexError(to_vertex)
        if to_vertex in source.edges:
            raise DuplicateEdgeError(from_vertex, to_vertex)
        source.edges[to_vertex] = DigraphEdge(from_vertex, to_vertex, einfo)
        logger.debug(f"Added edge {from_vertex} -> {to_vertex}")

    def remove_vertex(self, vertex: int) -> None:
        """
        Remove a vertex and every edge incident to it.

        Raises:
            UnknownVertexError: If the vertex does not exist
        """
        if vertex not in self.vertex_map:
            raise UnknownVertexError(vertex)

        # remove inbound edges
        removed_inbound = 0
        for start_id, record in self.vertex_map.items():
            if start_id != vertex and vertex in record.edges:
                del record.edges[vertex]
                removed_inbound += 1

        removed = self.vertex_map.pop(vertex)
        logger.debug(f"Removed vertex {vertex} with {len(removed.edges)} outgoing "
                     f"and {removed_inbound} incoming edges")

    def remove_edge(self, from_vertex: int, to_vertex: int) -> None:
        """
        Remove the edge from ``from_vertex`` to ``to_vertex``.

        Raises:
            UnknownVertexError: If ``from_vertex`` does not exist
            UnknownEdgeError: If the edge is not present
        """
        self._get_edge(from_vertex, to_vertex)
        del self.vertex_map[from_vertex].edges[to_vertex]
        logger.debug(f"Removed edge {from_vertex} -> {to_vertex}")

    def clear(self) -> None:
        self.vertex_map = {}

    # ------------------------------------------------------------------
    # value semantics
    # ------------------------------------------------------------------

    def copy(self) -> 'GraphStore':
        """Deep copy: no vertex, edge or payload is shared with the result."""
        duplicate = GraphStore()
        duplicate.vertex_map = {vertex: record.copy() for vertex, record in self.vertex_map.items()}
        return duplicate

    def take(self) -> 'GraphStore':
        """Move the contents into a new store, leaving this one empty."""
        moved = GraphStore()
        moved.vertex_map, self.vertex_map = self.vertex_map, {}
        return moved

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphStore):
            return NotImplemented
        return self.vertex_map == other.vertex_map

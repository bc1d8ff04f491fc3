"""
Main facade class for directed graphs.

This module provides the Digraph class, which owns a GraphStore and delegates
connectivity and shortest-path questions to the analysis modules.
"""

import logging
from typing import Any, List, Optional, Set, Tuple

from .graph import GraphStore
from ..analysis.connectivity import ConnectivityAnalyzer
from ..analysis.pathfinding import EdgeWeightFunc, PathFinder, ShortestPathResult

logger = logging.getLogger(__name__)


class Digraph:
    """
    Directed graph with a payload on every vertex and every edge.

    Vertices are identified by integer numbers, which need not be contiguous
    or zero-based. At most one edge exists per ordered pair of vertices.

    A Digraph behaves as a value: ``copy()`` (and ``copy.copy`` /
    ``copy.deepcopy``) yields a fully independent graph, and ``take()`` /
    ``move_from()`` transfer the contents and leave the source empty.
    Instances are not synchronized; callers sharing one across threads must
    lock around mutations.
    """

    def __init__(self):
        """Initialize an empty directed graph."""
        self._graph = GraphStore()

    @classmethod
    def _from_store(cls, store: GraphStore) -> 'Digraph':
        digraph = cls.__new__(cls)
        digraph._graph = store
        return digraph

    # ========================================================================
    # VALUE SEMANTICS
    # ========================================================================

    def copy(self) -> 'Digraph':
        """Return a deep copy; later changes to either graph do not affect the other."""
        return self._from_store(self._graph.copy())

    def __copy__(self) -> 'Digraph':
        return self.copy()

    def __deepcopy__(self, memo) -> 'Digraph':
        return self.copy()

    @classmethod
    def take(cls, source: 'Digraph') -> 'Digraph':
        """Build a graph from the contents of ``source``, leaving ``source`` empty."""
        return cls._from_store(source._graph.take())

    def move_from(self, source: 'Digraph') -> 'Digraph':
        """Replace this graph's contents with those of ``source``, leaving ``source`` empty."""
        if source is not self:
            self._graph = source._graph.take()
        return self

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def vertices(self) -> Set[int]:
        """Get the vertex numbers of every vertex."""
        return self._graph.vertices()

    def edges(self, vertex: Optional[int] = None) -> Set[Tuple[int, int]]:
        """Get (from, to) pairs of all edges, or only those outgoing from ``vertex``."""
        return self._graph.edges(vertex)

    def vertex_info(self, vertex: int) -> Any:
        """Get the payload of a vertex."""
        return self._graph.vertex_info(vertex)

    def edge_info(self, from_vertex: int, to_vertex: int) -> Any:
        """Get the payload of an edge."""
        return self._graph.edge_info(from_vertex, to_vertex)

    def vertex_count(self) -> int:
        return self._graph.vertex_count()

    def edge_count(self, vertex: Optional[int] = None) -> int:
        """Count all edges, or only those outgoing from ``vertex``."""
        return self._graph.edge_count(vertex)

    def has_vertex(self, vertex: int) -> bool:
        return self._graph.has_vertex(vertex)

    def has_edge(self, from_vertex: int, to_vertex: int) -> bool:
        return self._graph.has_edge(from_vertex, to_vertex)

    def successors(self, vertex: int) -> List[int]:
        return self._graph.successors(vertex)

    def predecessors(self, vertex: int) -> List[int]:
        return self._graph.predecessors(vertex)

    def in_degree(self, vertex: int) -> int:
        return self._graph.in_degree(vertex)

    def out_degree(self, vertex: int) -> int:
        return self._graph.out_degree(vertex)

    def get_sources(self) -> List[int]:
        """Get vertices with no incoming edges."""
        return self._graph.get_sources()

    def get_sinks(self) -> List[int]:
        """Get vertices with no outgoing edges."""
        return self._graph.get_sinks()

    # ========================================================================
    # MUTATION OPERATIONS
    # ========================================================================

    def add_vertex(self, vertex: int, vinfo: Any) -> None:
        """Add a vertex; raises DuplicateVertexError if it already exists."""
        self._graph.add_vertex(vertex, vinfo)

    def add_edge(self, from_vertex: int, to_vertex: int, einfo: Any) -> None:
        """Add an edge; raises UnknownVertexError or DuplicateEdgeError."""
        self._graph.add_edge(from_vertex, to_vertex, einfo)

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex and all of its incoming and outgoing edges."""
        self._graph.remove_vertex(vertex)

    def remove_edge(self, from_vertex: int, to_vertex: int) -> None:
        """Remove an edge; raises UnknownVertexError or UnknownEdgeError."""
        self._graph.remove_edge(from_vertex, to_vertex)

    def clear(self) -> None:
        self._graph.clear()

    # ========================================================================
    # CONNECTIVITY ANALYSIS
    # ========================================================================

    def is_strongly_connected(self) -> bool:
        """Check whether every vertex is reachable from every other vertex."""
        return ConnectivityAnalyzer(self._graph).is_strongly_connected()

    def reachable_from(self, vertex: int) -> Set[int]:
        """Vertices reachable from ``vertex``, including itself."""
        return ConnectivityAnalyzer(self._graph).reachable_from(vertex)

    def reaching(self, vertex: int) -> Set[int]:
        """Vertices that can reach ``vertex``, including itself."""
        return ConnectivityAnalyzer(self._graph).reaching(vertex)

    def strongly_connected_components(self) -> List[List[int]]:
        return ConnectivityAnalyzer(self._graph).strongly_connected_components()

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def find_shortest_paths(self, start_vertex: int, edge_weight_func: EdgeWeightFunc):
        """
        Run Dijkstra's algorithm from ``start_vertex``.

        Returns a dict mapping each vertex to its predecessor on the shortest
        path. The start vertex and unreached vertices map to themselves.
        """
        return PathFinder(self._graph).find_shortest_paths(start_vertex, edge_weight_func)

    def shortest_path_tree(self, start_vertex: int, edge_weight_func: EdgeWeightFunc,
                           strict_weights: bool = False) -> ShortestPathResult:
        """Run Dijkstra's algorithm and keep distances as well as predecessors."""
        return PathFinder(self._graph, strict_weights).shortest_path_tree(start_vertex, edge_weight_func)

    def shortest_path(self, start_vertex: int, target_vertex: int,
                      edge_weight_func: EdgeWeightFunc) -> List[int]:
        """Vertices on the shortest path to ``target_vertex``, empty if unreachable."""
        return self.shortest_path_tree(start_vertex, edge_weight_func).path_to(target_vertex)

    # ========================================================================
    # PYTHON PROTOCOLS
    # ========================================================================

    def __len__(self) -> int:
        return self._graph.vertex_count()

    def __contains__(self, vertex: object) -> bool:
        return self._graph.has_vertex(vertex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digraph):
            return NotImplemented
        return self._graph == other._graph

    __hash__ = None

    def __repr__(self) -> str:
        return f"Digraph(vertices={self.vertex_count()}, edges={self.edge_count()})"

"""
Reachability and strong-connectivity analysis for directed graphs.

This module provides depth-first reachability in both edge directions and the
strong-connectivity checks built on it.
"""

import logging
from typing import List, Set

from ..classes.utils import (
    depth_first_reachable,
    find_strongly_connected_components,
    reverse_adjacency,
)
from ..core.exceptions import UnknownVertexError
from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    """
    Connectivity analysis over a graph store.

    This class provides methods for:
    - Finding the vertices reachable from a vertex
    - Finding the vertices that can reach a vertex
    - Testing strong connectivity
    - Listing strongly connected components

    The store is only read; each call works on a fresh adjacency snapshot.
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the connectivity analyzer.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def reachable_from(self, vertex: int) -> Set[int]:
        """
        Find all vertices reachable from ``vertex`` along outgoing edges.

        Args:
            vertex: Start vertex (always part of the result)

        Returns:
            Set of reachable vertex numbers

        Raises:
            UnknownVertexError: If the vertex does not exist
        """
        if not self.graph.has_vertex(vertex):
            raise UnknownVertexError(vertex)
        return depth_first_reachable(self.graph.adjacency(), vertex)

    def reaching(self, vertex: int) -> Set[int]:
        """
        Find all vertices that can reach ``vertex``, using backward traversal.

        Raises:
            UnknownVertexError: If the vertex does not exist
        """
        if not self.graph.has_vertex(vertex):
            raise UnknownVertexError(vertex)
        return depth_first_reachable(reverse_adjacency(self.graph.adjacency()), vertex)

    def is_strongly_connected(self) -> bool:
        """
        Check whether every vertex can reach every other vertex.

        Picks the smallest vertex as root and requires it to reach every vertex
        both in the graph and in the graph with all edges reversed. An empty
        graph is not strongly connected.

        Returns:
            True if the graph is strongly connected
        """
        vertex_count = self.graph.vertex_count()
        if vertex_count == 0:
            logger.debug("Empty graph is not strongly connected")
            return False

        adjacency = self.graph.adjacency()
        root = min(adjacency)

        forward = depth_first_reachable(adjacency, root)
        if len(forward) != vertex_count:
            logger.debug(f"Vertex {root} reaches {len(forward)} of {vertex_count} vertices")
            return False

        backward = depth_first_reachable(reverse_adjacency(adjacency), root)
        if len(backward) != vertex_count:
            logger.debug(f"Vertex {root} is reached by {len(backward)} of {vertex_count} vertices")
            return False

        return True

    def strongly_connected_components(self) -> List[List[int]]:
        """
        Partition the vertices into strongly connected components.

        Returns:
            List of components, each a sorted list of vertex numbers, ordered by
            smallest member
        """
        return find_strongly_connected_components(self.graph.adjacency())

"""
Shortest-path analysis for directed graphs.

This module provides Dijkstra's algorithm over a graph store, with edge
weights taken from a caller-supplied function of the edge payload.
"""

import logging
import math
from typing import Any, Callable, Dict, List

import numpy as np

from ..core.exceptions import UnknownVertexError
from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

EdgeWeightFunc = Callable[[Any], float]


class ShortestPathResult:
    """
    Shortest-path tree rooted at a start vertex.

    ``predecessors`` maps every vertex to the previous vertex on its shortest
    path; the start vertex and unreached vertices map to themselves.
    ``distances`` holds the total weight, ``inf`` when unreached.
    """

    def __init__(self, start: int, predecessors: Dict[int, int], distances: Dict[int, float]):
        self.start = start
        self.predecessors = predecessors
        self.distances = distances

    def is_reachable(self, vertex: int) -> bool:
        return math.isfinite(self.distance_to(vertex))

    def distance_to(self, vertex: int) -> float:
        try:
            return self.distances[vertex]
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def path_to(self, vertex: int) -> List[int]:
        """
        Vertices on the shortest path from the start to ``vertex``.

        Returns:
            List starting with the start vertex and ending with ``vertex``, or
            an empty list if ``vertex`` was not reached
        """
        if not self.is_reachable(vertex):
            return []

        path = [vertex]
        while vertex != self.start:
            vertex = self.predecessors[vertex]
            path.append(vertex)
        path.reverse()
        return path

    def __repr__(self) -> str:
        reached = sum(1 for d in self.distances.values() if math.isfinite(d))
        return f"ShortestPathResult(start={self.start}, reached={reached}/{len(self.distances)})"


class PathFinder:
    """
    Shortest-path algorithms for directed graphs.

    Tentative distances and settled flags live in numpy arrays indexed by
    sorted vertex number. ``np.argmin`` returns the first minimum, so ties
    between equal distances always go to the smallest vertex number.

    This is the dense-array form of Dijkstra: every selection scans all V
    entries, so a run costs O(V^2 + E) even on sparse graphs. Every outgoing
    edge of a settled vertex is weighed exactly once, including edges back
    into settled vertices and self-loops.
    """

    def __init__(self, graph: GraphStore, strict_weights: bool = False):
        """
        Initialize the path finder.

        Args:
            graph: GraphStore instance to analyze
            strict_weights: Reject negative or NaN edge weights with ValueError
                instead of using them as provided
        """
        self.graph = graph
        self.strict_weights = strict_weights

    def _edge_weight(self, edge_weight_func: EdgeWeightFunc, einfo: Any,
                     from_vertex: int, to_vertex: int) -> float:
        weight = float(edge_weight_func(einfo))
        if self.strict_weights and (math.isnan(weight) or weight < 0):
            raise ValueError(f"Edge {from_vertex} -> {to_vertex} has invalid weight {weight}")
        return weight

    def shortest_path_tree(self, start_vertex: int, edge_weight_func: EdgeWeightFunc) -> ShortestPathResult:
        """
        Run Dijkstra's algorithm from ``start_vertex``.

        Args:
            start_vertex: Vertex the paths start from
            edge_weight_func: Maps an edge payload to a non-negative weight

        Returns:
            ShortestPathResult with predecessors and distances for every vertex

        Raises:
            UnknownVertexError: If the start vertex does not exist
        """
        if not self.graph.has_vertex(start_vertex):
            raise UnknownVertexError(start_vertex)

        keys = sorted(self.graph.vertices())
        position = {vertex: i for i, vertex in enumerate(keys)}

        distance = np.full(len(keys), np.inf)
        settled = np.zeros(len(keys), dtype=bool)
        predecessors = {vertex: vertex for vertex in keys}
        distance[position[start_vertex]] = 0.0

        settled_count = 0
        while settled_count < len(keys):
            candidates = np.where(settled, np.inf, distance)
            current = int(np.argmin(candidates))
            if not np.isfinite(candidates[current]):
                # Remaining vertices are unreachable
                break

            settled[current] = True
            settled_count += 1
            current_vertex = keys[current]

            for edge in self.graph.outgoing(current_vertex):
                neighbor = position[edge.to_vertex]
                weight = self._edge_weight(edge_weight_func, edge.einfo, current_vertex, edge.to_vertex)
                if settled[neighbor]:
                    continue
                candidate_distance = distance[current] + weight
                if candidate_distance < distance[neighbor]:
                    distance[neighbor] = candidate_distance
                    predecessors[edge.to_vertex] = current_vertex

        logger.debug(f"Shortest paths from {start_vertex}: settled {settled_count} of {len(keys)} vertices")

        distances = {vertex: float(distance[position[vertex]]) for vertex in keys}
        return ShortestPathResult(start_vertex, predecessors, distances)

    def find_shortest_paths(self, start_vertex: int, edge_weight_func: EdgeWeightFunc) -> Dict[int, int]:
        """
        Map each vertex to its predecessor on the shortest path from ``start_vertex``.

        The start vertex and unreached vertices map to themselves.
        """
        return self.shortest_path_tree(start_vertex, edge_weight_func).predecessors

"""
Digraph - Directed Graph Library

A Python library providing a generic directed graph with a payload on every
vertex and edge, structural mutation, strong-connectivity testing and
single-source shortest paths.

Main Classes:
    Digraph: Directed graph (facade over the store and the analyzers)
    GraphStore: Adjacency-list storage with the mutation/query contract
    ConnectivityAnalyzer: Reachability and strong connectivity
    PathFinder: Dijkstra shortest paths

Example:
    >>> from digraph import Digraph
    >>> graph = Digraph()
    >>> graph.add_vertex(1, "a")
    >>> graph.add_vertex(2, "b")
    >>> graph.add_edge(1, 2, 4.0)
    >>> graph.find_shortest_paths(1, float)
    {1: 1, 2: 1}
"""

__version__ = "0.1.0"

from digraph.core.exceptions import (
    ErrorCode,
    DigraphException,
    UnknownVertexError,
    UnknownEdgeError,
    DuplicateVertexError,
    DuplicateEdgeError,
)
from digraph.core.graph import GraphStore
from digraph.core.digraph import Digraph
from digraph.analysis.connectivity import ConnectivityAnalyzer
from digraph.analysis.pathfinding import PathFinder, ShortestPathResult

__all__ = [
    'Digraph',
    'GraphStore',
    'ConnectivityAnalyzer',
    'PathFinder',
    'ShortestPathResult',
    'ErrorCode',
    'DigraphException',
    'UnknownVertexError',
    'UnknownEdgeError',
    'DuplicateVertexError',
    'DuplicateEdgeError',
]

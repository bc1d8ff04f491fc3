"""
Record classes for graph storage.

This module contains the vertex and edge records owned by the graph store.
"""

from .edge import DigraphEdge
from .vertex import DigraphVertex

__all__ = [
    'DigraphEdge',
    'DigraphVertex',
]

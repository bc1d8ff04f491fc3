"""
Core graph data structures and management.

This module contains the graph store, the public Digraph facade and the
exception family, without the analysis algorithms.
"""

__all__ = []

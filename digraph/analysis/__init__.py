"""
Graph analysis modules for connectivity and shortest paths.
"""

__all__ = []

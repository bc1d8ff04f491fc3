# digraph/tests/conftest.py
import os
import sys

import pytest

# Add the project root (the parent of tests/) to sys.path so `import digraph` works uninstalled
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from digraph import Digraph  # noqa: E402


@pytest.fixture
def triangle():
    """1 -> 2 -> 3 -> 1, strongly connected."""
    g = Digraph()
    for v in (1, 2, 3):
        g.add_vertex(v, f"v{v}")
    g.add_edge(1, 2, 1.0)
    g.add_edge(2, 3, 1.0)
    g.add_edge(3, 1, 1.0)
    return g


@pytest.fixture
def weighted():
    """1->2 (1), 2->3 (1), 1->3 (5), 3->4 (1), plus an isolated vertex 5."""
    g = Digraph()
    for v in (1, 2, 3, 4, 5):
        g.add_vertex(v, None)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(1, 3, 5)
    g.add_edge(3, 4, 1)
    return g

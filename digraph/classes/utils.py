"""
Utility functions for digraph.

Pure algorithms over plain adjacency dictionaries (vertex -> list of
successors). They know nothing about payloads or the store, so the analysis
layer can feed them either the forward or the reversed adjacency.
"""

import logging
from typing import Dict, Iterator, List, Set, Tuple

logger = logging.getLogger(__name__)


def reverse_adjacency(adjacency_dict: Dict[int, List[int]]) -> Dict[int, List[int]]:
    """
    Build the adjacency of the graph with every edge reversed.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of successor node_ids

    Returns:
        Dictionary mapping node_id -> sorted list of predecessor node_ids.
        Every node of the input appears as a key.
    """
    reverse: Dict[int, List[int]] = {node: [] for node in adjacency_dict}
    for start_id, neighbors in adjacency_dict.items():
        for end_id in neighbors:
            reverse.setdefault(end_id, []).append(start_id)

    return {node: sorted(predecessors) for node, predecessors in reverse.items()}


def depth_first_reachable(adjacency_dict: Dict[int, List[int]], start: int) -> Set[int]:
    """
    Collect every node reachable from ``start`` using depth-first traversal.

    Uses an explicit stack of (node, successor iterator) frames instead of
    recursion. A node is marked when it is pushed and never pushed again, so
    cycles terminate.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of successor node_ids
        start: Node to start from (included in the result)

    Returns:
        Set of reachable node IDs
    """
    visited = {start}
    stack: List[Tuple[int, Iterator[int]]] = [(start, iter(adjacency_dict.get(start, ())))]

    while stack:
        node, cursor = stack[-1]
        for neighbor in cursor:
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append((neighbor, iter(adjacency_dict.get(neighbor, ()))))
                break
        else:
            stack.pop()

    return visited


def find_strongly_connected_components(adjacency_dict: Dict[int, List[int]]) -> List[List[int]]:
    """
    Find strongly connected components using Tarjan's algorithm.

    Iterative version: each stack frame holds a node and the cursor into its
    successor list, so deep graphs do not hit the recursion limit.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of connected node_ids

    Returns:
        List of strongly connected components, each as a sorted list of node
        IDs, ordered by their smallest member
    """
    index_counter = 0
    stack: List[int] = []
    on_stack: Set[int] = set()
    lowlinks: Dict[int, int] = {}
    index: Dict[int, int] = {}
    components: List[List[int]] = []

    for root in sorted(adjacency_dict):
        if root in index:
            continue

        index[root] = lowlinks[root] = index_counter
        index_counter += 1
        stack.append(root)
        on_stack.add(root)
        work: List[Tuple[int, Iterator[int]]] = [(root, iter(adjacency_dict.get(root, ())))]

        while work:
            node, cursor = work[-1]
            descended = False
            for neighbor in cursor:
                if neighbor not in index:
                    # Successor has not yet been visited; descend into it
                    index[neighbor] = lowlinks[neighbor] = index_counter
                    index_counter += 1
                    stack.append(neighbor)
                    on_stack.add(neighbor)
                    work.append((neighbor, iter(adjacency_dict.get(neighbor, ()))))
                    descended = True
                    break
                elif neighbor in on_stack:
                    lowlinks[node] = min(lowlinks[node], index[neighbor])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

            # If node is a root node, pop the stack and create an SCC
            if lowlinks[node] == index[node]:
                component = []
                while True:
                    w = stack.pop()
                    on_stack.discard(w)
                    component.append(w)
                    if w == node:
                        break
                components.append(sorted(component))

    components.sort(key=lambda members: members[0])
    logger.debug(f"Found {len(components)} strongly connected components")
    return components

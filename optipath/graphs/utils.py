"""
Utility functions for path algorithms.

Provides helpers for node indexing, path reconstruction and evaluation, and
dense export of all-pairs tables.
"""

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

import numpy as np

from .core import AdjacencyGraph
from .dioid import Dioid


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by their natural order.

    Args:
        nodes: Iterable of hashable, orderable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sorted(set(nodes))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def reconstruct_path(
    parent: Mapping[Hashable, Hashable], source: Hashable, target: Hashable
) -> List[Hashable]:
    """
    Reconstruct the path from source to target using a parent map.

    Walks parent pointers backward from ``target`` until ``source`` is
    reached, then reverses the walk.

    Args:
        parent: Mapping node -> previous node on its optimum path. The source
            has no entry.
        source: Start of the path.
        target: End of the path.

    Returns:
        List of nodes from source to target (inclusive), ``[source]`` when
        target is the source, or an empty list when the walk never reaches
        the source.

    Example:
        >>> parent = {'b': 'a', 'c': 'b'}
        >>> reconstruct_path(parent, 'a', 'c')
        ['a', 'b', 'c']
        >>> reconstruct_path(parent, 'a', 'd')
        []
    """
    path = [target]
    seen = {target}
    current = target
    while current != source:
        if current not in parent:
            return []
        current = parent[current]
        if current in seen:
            # Cycle in the parent map
            return []
        seen.add(current)
        path.append(current)

    path.reverse()
    return path


def path_label(graph: AdjacencyGraph, path: List[Hashable], dioid: Dioid) -> Any:
    """
    Accumulate edge labels along a path with ``extend``.

    Args:
        graph: Graph holding the edges.
        path: Sequence of vertices.
        dioid: Edge-label algebra.

    Returns:
        ``one`` for a single-vertex path, the extended labels of consecutive
        edges otherwise, and ``zero`` for an empty path or a missing edge.
    """
    if not path:
        return dioid.zero

    total = dioid.one
    for u, v in zip(path, path[1:]):
        labels = dict(graph.neighbors(u))
        if v not in labels:
            return dioid.zero
        total = dioid.extend(total, labels[v])
    return total


def table_to_matrix(
    table: Mapping[Hashable, Mapping[Hashable, Any]],
    nodes: Optional[Iterable[Hashable]] = None,
) -> Tuple[np.ndarray, List[Hashable]]:
    """
    Convert an all-pairs table to a dense float matrix.

    Only meaningful for numeric labels (distances, capacities,
    probabilities, booleans); infinities are kept as ``inf``.

    Args:
        table: Nested mapping row vertex -> column vertex -> label, such as
            the result of :func:`floyd_warshall`.
        nodes: Optional subset of vertices to include (defaults to all rows).

    Returns:
        Tuple of the (n, n) matrix and the vertex order of its rows and
        columns.

    Example:
        >>> M, order = table_to_matrix(floyd_warshall(G))
        >>> M[order.index('a'), order.index('c')]
        4.0
    """
    node_to_idx, idx_to_node = node_index_map(table if nodes is None else nodes)
    n = len(idx_to_node)

    matrix = np.empty((n, n), dtype=float)
    for u, i in node_to_idx.items():
        row = table[u]
        for v, j in node_to_idx.items():
            matrix[i, j] = float(row[v])

    return matrix, idx_to_node

"""
All-pairs optimum path algorithm over a dioid: Floyd-Warshall.

Computes the optimum label between every ordered pair of vertices.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Any, Dict, Hashable

from ..diagnostics import assert_identities, is_debug_enabled
from ..logging import get_logger
from .core import AdjacencyGraph
from .dioid import DISTANCE, Dioid

logger = get_logger(__name__)


def floyd_warshall(graph: AdjacencyGraph, dioid: Dioid = DISTANCE) -> Dict[Hashable, Dict[Hashable, Any]]:
    """
    Generic Floyd-Warshall algorithm for all-pairs optimum labels.

    Starts from a |V| x |V| table holding ``one`` on the diagonal, the edge
    label where an edge exists and ``zero`` elsewhere, then relaxes

        table[i][j] = combine(table[i][j], extend(table[i][k], table[k][j]))

    with the intermediate vertex ``k`` as the outermost loop. When ``k`` is
    processed every entry is already optimal over paths whose intermediate
    vertices precede ``k``; nesting ``k`` anywhere else breaks that
    invariant and silently gives wrong answers.

    Same preconditions as :func:`~optipath.graphs.shortest.dijkstra`. Row
    ``v`` of the result equals ``dijkstra(graph, v, dioid)`` and
    ``bellman_ford(graph, v, dioid)``.

    Args:
        graph: Graph exposing ``vertices`` and ``neighbors``.
        dioid: Edge-label algebra (default: shortest distance).

    Returns:
        Nested dictionary: ``table[u][v]`` is the optimum label from u to v.

    Complexity: O(V^3).

    Example:
        >>> G = LabelledGraph.from_edges([("a", "b", 1), ("b", "c", 2)])
        >>> table = floyd_warshall(G)
        >>> table["a"]["c"]
        3
        >>> table["c"]["a"]
        inf
    """
    if is_debug_enabled():
        assert_identities(dioid)

    vertices = list(graph.vertices())
    table: Dict[Hashable, Dict[Hashable, Any]] = {
        i: {j: dioid.zero for j in vertices} for i in vertices
    }
    for i in vertices:
        row = table[i]
        for j, label in graph.neighbors(i):
            row[j] = label
        row[i] = dioid.one

    combine, extend = dioid.combine, dioid.extend
    for k in vertices:
        row_k = table[k]
        for i in vertices:
            row_i = table[i]
            via_k = row_i[k]
            for j in vertices:
                row_i[j] = combine(row_i[j], extend(via_k, row_k[j]))

    logger.debug("floyd_warshall: relaxed %d x %d table", len(vertices), len(vertices))
    return table

"""
Single-source optimum path algorithms over a dioid: Dijkstra and Bellman-Ford.

Both algorithms are generic in the edge-label algebra. With ``DISTANCE`` they
compute shortest paths, with ``CAPACITY`` widest paths, and so on for any
selective dioid whose labels are totally ordered.

Preconditions (not checked unless debug mode is enabled):

1. ``combine`` is selective, i.e. always returns one of its arguments.
2. The dioid has an optimisation criterion compatible with the natural order
   of its labels, so extending a path never makes it better. This rules out
   the analogue of negative cycles.

Every vertex of the graph appears in the result. Unreachable vertices map to
``zero``; a source that is not in the graph yields the all-``zero`` mapping.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
    - Mohri. "Semiring Frameworks and Algorithms for Shortest-Distance
      Problems", J. Autom. Lang. Comb. 7 (2002).
"""

import heapq
from typing import Any, Dict, Hashable, List, Set, Tuple

from ..diagnostics import assert_identities, is_debug_enabled
from ..logging import get_logger
from .core import AdjacencyGraph
from .dioid import DISTANCE, Dioid, Direction, is_better, traversal_direction
from .utils import reconstruct_path

logger = get_logger(__name__)


class _Reversed:
    """Heap entry wrapper that inverts the ordering of the wrapped tuple."""

    __slots__ = ("entry",)

    def __init__(self, entry: Tuple[Any, Hashable]):
        self.entry = entry

    def __lt__(self, other: "_Reversed") -> bool:
        return other.entry < self.entry


class _Frontier:
    """
    Binary heap of (label, vertex) entries popped in traversal order.

    Ascending traversal pops the smallest entry first, descending the
    largest. Equal labels are ordered by vertex.
    """

    def __init__(self, direction: Direction):
        self._descending = direction is Direction.DESCENDING
        self._heap: List[Any] = []

    def push(self, label: Any, vertex: Hashable) -> None:
        entry = (label, vertex)
        heapq.heappush(self._heap, _Reversed(entry) if self._descending else entry)

    def pop(self) -> Tuple[Any, Hashable]:
        item = heapq.heappop(self._heap)
        return item.entry if self._descending else item

    def __bool__(self) -> bool:
        return bool(self._heap)


def _zero_map(graph: AdjacencyGraph, dioid: Dioid) -> Dict[Hashable, Any]:
    return {vertex: dioid.zero for vertex in graph.vertices()}


def dijkstra(graph: AdjacencyGraph, source: Hashable, dioid: Dioid = DISTANCE) -> Dict[Hashable, Any]:
    """
    Generic Dijkstra algorithm for single-source optimum labels.

    The frontier extracts the best label first; whether that is the
    smallest or the largest is derived once from the dioid (see
    :func:`~optipath.graphs.dioid.traversal_direction`). A vertex is
    finalized when it is extracted and its label is never revised
    afterwards. Stale frontier entries are skipped, so no decrease-key is
    needed.

    Args:
        graph: Graph exposing ``vertices``, ``neighbors`` and ``has_vertex``.
        source: Source vertex.
        dioid: Edge-label algebra (default: shortest distance).

    Returns:
        Dictionary mapping every vertex -> optimum label from source.

    Complexity: O(E log E) using a binary heap.

    Example:
        >>> G = LabelledGraph.from_edges([("a", "c", 5), ("a", "b", 3), ("b", "c", 1)])
        >>> dijkstra(G, "a")
        {'a': 0, 'b': 3, 'c': 4}
        >>> dijkstra(G, "a", CAPACITY)
        {'a': inf, 'b': 3, 'c': 5}
    """
    if is_debug_enabled():
        assert_identities(dioid)

    dist = _zero_map(graph, dioid)
    if not graph.has_vertex(source):
        logger.debug("dijkstra: source %r not in graph, returning zero mapping", source)
        return dist

    direction = traversal_direction(dioid)
    logger.debug("dijkstra: %s traversal from %r over %d vertices", direction.value, source, len(dist))

    dist[source] = dioid.one
    frontier = _Frontier(direction)
    frontier.push(dioid.one, source)
    visited: Set[Hashable] = set()

    while frontier:
        _, v1 = frontier.pop()
        if v1 in visited:
            continue
        visited.add(v1)

        for v2, label in graph.neighbors(v1):
            if v2 in visited:
                continue
            n = dioid.combine(dioid.extend(dist[v1], label), dist[v2])
            if n != dist[v2]:
                dist[v2] = n
                frontier.push(n, v2)

    logger.debug("dijkstra: finalized %d vertices", len(visited))
    return dist


def shortest_path(
    graph: AdjacencyGraph, source: Hashable, dioid: Dioid = DISTANCE
) -> Dict[Hashable, Tuple[Any, List[Hashable]]]:
    """
    Dijkstra variant that also returns an optimum path to every vertex.

    Runs the same traversal as :func:`dijkstra` while threading a parent
    map. Parent tracking is independent of finalization: on every
    relaxation of ``v1 -> v2`` the parent of ``v2`` becomes ``v1`` whenever
    the relaxed label is strictly better than the label recorded just
    before, even if ``v2`` is already finalized.

    Args:
        graph: Graph exposing ``vertices``, ``neighbors`` and ``has_vertex``.
        source: Source vertex.
        dioid: Edge-label algebra (default: shortest distance).

    Returns:
        Dictionary mapping every vertex -> (optimum label, path). The path
        runs from source to the vertex inclusive; it is ``[source]`` for the
        source and empty for vertices whose label is ``zero``.

    Example:
        >>> G = LabelledGraph.from_edges([("a", "c", 5), ("a", "b", 3), ("b", "c", 1)])
        >>> shortest_path(G, "a")["c"]
        (4, ['a', 'b', 'c'])
    """
    if is_debug_enabled():
        assert_identities(dioid)

    dist = _zero_map(graph, dioid)
    if not graph.has_vertex(source):
        logger.debug("shortest_path: source %r not in graph, returning zero mapping", source)
        return {vertex: (label, []) for vertex, label in dist.items()}

    direction = traversal_direction(dioid)
    logger.debug("shortest_path: %s traversal from %r", direction.value, source)

    dist[source] = dioid.one
    parent: Dict[Hashable, Hashable] = {}
    frontier = _Frontier(direction)
    frontier.push(dioid.one, source)
    visited: Set[Hashable] = set()

    while frontier:
        _, v1 = frontier.pop()
        if v1 in visited:
            continue
        visited.add(v1)

        for v2, label in graph.neighbors(v1):
            current = dist[v2]
            n = dioid.combine(dioid.extend(dist[v1], label), current)
            if is_better(direction, n, current):
                parent[v2] = v1
            if v2 in visited:
                continue
            if n != current:
                dist[v2] = n
                frontier.push(n, v2)

    paths: Dict[Hashable, Tuple[Any, List[Hashable]]] = {}
    for vertex, label in dist.items():
        if vertex == source:
            paths[vertex] = (label, [source])
        elif label == dioid.zero:
            paths[vertex] = (label, [])
        else:
            paths[vertex] = (label, reconstruct_path(parent, source, vertex))
    return paths


def bellman_ford(graph: AdjacencyGraph, source: Hashable, dioid: Dioid = DISTANCE) -> Dict[Hashable, Any]:
    """
    Generic Bellman-Ford algorithm for single-source optimum labels.

    Relaxes every edge once per round for |V| rounds, visiting vertices in
    sorted order. There is no early exit on convergence and no
    negative-cycle detection; termination with the right answer relies on
    the dioid preconditions. Same contract as :func:`dijkstra`, useful as a
    cross-check.

    Args:
        graph: Graph exposing ``vertices``, ``neighbors`` and ``has_vertex``.
        source: Source vertex.
        dioid: Edge-label algebra (default: shortest distance).

    Returns:
        Dictionary mapping every vertex -> optimum label from source.

    Complexity: O(VE).

    Example:
        >>> G = LabelledGraph.from_edges([("a", "c", 5), ("a", "b", 3), ("b", "c", 1)])
        >>> bellman_ford(G, "a")
        {'a': 0, 'b': 3, 'c': 4}
    """
    if is_debug_enabled():
        assert_identities(dioid)

    dist = _zero_map(graph, dioid)
    if not graph.has_vertex(source):
        logger.debug("bellman_ford: source %r not in graph, returning zero mapping", source)
        return dist

    dist[source] = dioid.one
    vertices = list(dist)
    edges = [(v1, v2, label) for v1 in vertices for v2, label in graph.neighbors(v1)]

    for _ in range(len(vertices)):
        for v1, v2, label in edges:
            dist[v2] = dioid.combine(dioid.extend(dist[v1], label), dist[v2])

    logger.debug("bellman_ford: %d rounds over %d edges", len(vertices), len(edges))
    return dist

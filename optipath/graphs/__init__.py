"""
Optimum path algorithms over dioids for optipath.

This package provides generic path algorithms parameterized by the algebra
of their edge labels:
- Dioid algebra (Dioid protocol, SelectiveDioid, built-in dioids)
- Graph data structure (LabelledGraph) and its read-only interface
- Single-source optimum labels (Dijkstra, Bellman-Ford)
- Optimum paths with reconstruction (shortest_path)
- All-pairs optimum labels (Floyd-Warshall)

All algorithms are deterministic and use sorted vertex ordering for
reproducibility.
"""

from .allpairs import floyd_warshall
from .core import AdjacencyGraph, LabelledGraph
from .dioid import (
    BOTTLENECK,
    CAPACITY,
    DISTANCE,
    RELIABILITY,
    REACHABILITY,
    Dioid,
    Direction,
    SelectiveDioid,
    is_better,
    traversal_direction,
)
from .shortest import bellman_ford, dijkstra, shortest_path
from .utils import node_index_map, path_label, reconstruct_path, table_to_matrix

__all__ = [
    "Dioid",
    "SelectiveDioid",
    "DISTANCE",
    "CAPACITY",
    "RELIABILITY",
    "BOTTLENECK",
    "REACHABILITY",
    "Direction",
    "traversal_direction",
    "is_better",
    "AdjacencyGraph",
    "LabelledGraph",
    "dijkstra",
    "shortest_path",
    "bellman_ford",
    "floyd_warshall",
    "node_index_map",
    "reconstruct_path",
    "path_label",
    "table_to_matrix",
]

# Example usage:
# from optipath.graphs import CAPACITY, LabelledGraph, dijkstra, shortest_path
#
# G = LabelledGraph.from_edges([("a", "b", 3), ("b", "c", 1), ("a", "c", 5)])
# dijkstra(G, "a")                # {'a': 0, 'b': 3, 'c': 4}
# dijkstra(G, "a", CAPACITY)      # {'a': inf, 'b': 3, 'c': 5}
# shortest_path(G, "a")["c"]      # (4, ['a', 'b', 'c'])

"""optipath - generic optimum-path algorithms over selective dioids."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_dioid_laws,
    assert_identities,
    check_dioid_laws,
    debug_context,
    is_debug_enabled,
    is_selective,
    set_debug_enabled,
)

# Graphs and path algorithms
from .graphs import (
    BOTTLENECK,
    CAPACITY,
    DISTANCE,
    RELIABILITY,
    REACHABILITY,
    AdjacencyGraph,
    Dioid,
    Direction,
    LabelledGraph,
    SelectiveDioid,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    is_better,
    node_index_map,
    path_label,
    reconstruct_path,
    shortest_path,
    table_to_matrix,
    traversal_direction,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Dioids
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
    # Graphs
    "AdjacencyGraph",
    "LabelledGraph",
    # Algorithms
    "dijkstra",
    "shortest_path",
    "bellman_ford",
    "floyd_warshall",
    # Helpers
    "node_index_map",
    "reconstruct_path",
    "path_label",
    "table_to_matrix",
    # Diagnostics
    "is_selective",
    "assert_identities",
    "check_dioid_laws",
    "assert_dioid_laws",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]

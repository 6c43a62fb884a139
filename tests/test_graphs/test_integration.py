"""Integration tests for graphs package within optipath."""

import math


def test_graphs_import_from_main():
    """Test that graph algorithms can be imported from the main package."""
    from optipath import (
        CAPACITY,
        DISTANCE,
        LabelledGraph,
        bellman_ford,
        dijkstra,
        floyd_warshall,
        shortest_path,
    )

    assert LabelledGraph is not None
    assert DISTANCE is not None
    assert CAPACITY is not None
    assert dijkstra is not None
    assert shortest_path is not None
    assert bellman_ford is not None
    assert floyd_warshall is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import optipath

    graph_exports = {
        "Dioid", "SelectiveDioid", "DISTANCE", "CAPACITY", "RELIABILITY",
        "BOTTLENECK", "REACHABILITY", "Direction", "traversal_direction",
        "LabelledGraph", "dijkstra", "shortest_path", "bellman_ford",
        "floyd_warshall", "node_index_map", "reconstruct_path", "path_label",
        "table_to_matrix",
    }

    all_exports = set(optipath.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"


def test_graphs_functional_integration():
    """Test that the algorithms work together in a realistic scenario."""
    from optipath import CAPACITY, LabelledGraph, dijkstra, floyd_warshall, shortest_path

    # A small network: latency on one view, bandwidth on the other.
    latency = LabelledGraph.from_edges(
        [("start", "A", 1), ("A", "B", 2), ("B", "end", 1), ("start", "end", 5)]
    )
    bandwidth = LabelledGraph.from_edges(
        [("start", "A", 10), ("A", "B", 2), ("B", "end", 10), ("start", "end", 5)]
    )

    assert shortest_path(latency, "start")["end"] == (4, ["start", "A", "B", "end"])
    assert shortest_path(bandwidth, "start", CAPACITY)["end"] == (5, ["start", "end"])
    assert dijkstra(bandwidth, "start", CAPACITY)["start"] == math.inf
    assert floyd_warshall(latency)["start"] == dijkstra(latency, "start")

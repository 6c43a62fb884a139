"""
Example: One Network, Several Path Problems

This example builds a small network once per label type and runs the same
algorithms with different dioids: shortest latency, widest bandwidth, most
reliable route and plain reachability. It also shows the all-pairs table as
a numpy matrix and the cross-check between the algorithms.
"""

from optipath import (
    CAPACITY,
    DISTANCE,
    REACHABILITY,
    RELIABILITY,
    LabelledGraph,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    shortest_path,
    table_to_matrix,
)

LINKS = [
    # (u, v, latency ms, bandwidth Mb/s, delivery probability)
    ("gw", "r1", 4, 100, 0.99),
    ("gw", "r2", 1, 10, 0.9),
    ("r2", "r1", 1, 40, 0.95),
    ("r1", "dc", 6, 100, 0.99),
    ("r2", "dc", 9, 25, 0.5),
    ("dc", "backup", 2, 1000, 0.999),
]


def example_shortest_latency():
    print("=" * 60)
    print("Example 1: Shortest latency (min, +)")
    print("=" * 60)

    G = LabelledGraph.from_edges([(u, v, ms) for u, v, ms, _, _ in LINKS])
    for vertex, (label, path) in shortest_path(G, "gw", DISTANCE).items():
        print(f"  gw -> {vertex:<7} {label:>4} ms  via {' -> '.join(path)}")
    print()


def example_widest_bandwidth():
    print("=" * 60)
    print("Example 2: Widest bandwidth (max, min)")
    print("=" * 60)

    G = LabelledGraph.from_edges([(u, v, bw) for u, v, _, bw, _ in LINKS])
    for vertex, (label, path) in shortest_path(G, "gw", CAPACITY).items():
        print(f"  gw -> {vertex:<7} {label:>6} Mb/s  via {' -> '.join(path)}")
    print()


def example_reliability_and_reachability():
    print("=" * 60)
    print("Example 3: Most reliable route (max, *) and reachability (or, and)")
    print("=" * 60)

    reliability = LabelledGraph.from_edges([(u, v, p) for u, v, _, _, p in LINKS])
    reach = LabelledGraph.from_edges([(u, v, True) for u, v, _, _, _ in LINKS])

    probabilities = dijkstra(reliability, "gw", RELIABILITY)
    reachable = dijkstra(reach, "r1", REACHABILITY)
    for vertex in reliability.vertices():
        print(
            f"  {vertex:<7} P(delivery from gw) = {probabilities[vertex]:.4f}"
            f"   reachable from r1: {reachable[vertex]}"
        )
    print()


def example_all_pairs():
    print("=" * 60)
    print("Example 4: All-pairs latency table and cross-check")
    print("=" * 60)

    G = LabelledGraph.from_edges([(u, v, ms) for u, v, ms, _, _ in LINKS])
    table = floyd_warshall(G)
    matrix, order = table_to_matrix(table)

    print("  order:", order)
    print(matrix)

    agree = all(
        table[v] == dijkstra(G, v) == bellman_ford(G, v) for v in G.vertices()
    )
    print(f"  Floyd-Warshall rows match Dijkstra and Bellman-Ford: {agree}")
    print()


if __name__ == "__main__":
    example_shortest_latency()
    example_widest_bandwidth()
    example_reliability_and_reachability()
    example_all_pairs()

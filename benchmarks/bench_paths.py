"""Benchmark the optimum path algorithms on random graphs."""

import time
from typing import Callable, Dict

import numpy as np

from optipath import DISTANCE, LabelledGraph, bellman_ford, dijkstra, floyd_warshall


def random_graph(n_vertices: int, density: float, seed: int = 0) -> LabelledGraph:
    """Random directed graph with integer latencies in [1, 100)."""
    rng = np.random.default_rng(seed)
    mask = rng.random((n_vertices, n_vertices)) < density
    np.fill_diagonal(mask, False)
    weights = rng.integers(1, 100, size=(n_vertices, n_vertices))

    graph = LabelledGraph()
    for v in range(n_vertices):
        graph.add_node(v)
    for u, v in zip(*np.nonzero(mask)):
        graph.add_edge(int(u), int(v), int(weights[u, v]))
    return graph


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_paths(n_vertices: int, density: float = 0.1, repeats: int = 5) -> Dict[str, float]:
    """Time single-source and all-pairs algorithms on one random graph.

    Args:
        n_vertices: Number of vertices.
        density: Probability of each directed edge.
        repeats: Timed repetitions per algorithm.

    Returns:
        Dictionary with mean seconds per call.
    """
    graph = random_graph(n_vertices, density)
    n_edges = len(graph.edges())

    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "dijkstra_sec": _time(lambda: dijkstra(graph, 0, DISTANCE), repeats),
        "bellman_ford_sec": _time(lambda: bellman_ford(graph, 0, DISTANCE), repeats),
        "floyd_warshall_sec": _time(lambda: floyd_warshall(graph, DISTANCE), max(1, repeats // 5)),
    }


if __name__ == "__main__":
    print("Benchmarking optimum path algorithms...")

    for n in (50, 100, 200):
        results = benchmark_paths(n_vertices=n)
        print(f"Random graph ({results['n_vertices']} vertices, {results['n_edges']} edges):")
        print(f"  dijkstra:       {results['dijkstra_sec']*1e3:.3f} ms")
        print(f"  bellman_ford:   {results['bellman_ford_sec']*1e3:.3f} ms")
        print(f"  floyd_warshall: {results['floyd_warshall_sec']*1e3:.3f} ms")

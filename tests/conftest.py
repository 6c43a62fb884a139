"""Pytest configuration and shared fixtures for optipath tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory for reproducible random labelled graphs
- Restoration of the global debug flag after each test
"""

import os
from typing import Callable, Sequence

import numpy as np
import pytest

from optipath.diagnostics import is_debug_enabled, set_debug_enabled
from optipath.graphs import LabelledGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., LabelledGraph]:
    """Factory for random directed graphs over integer vertices 0..n-1.

    Each ordered pair (u, v) with u != v gets an edge with probability
    ``density``; its label is drawn uniformly from ``labels``.
    """

    def build(n: int, labels: Sequence, density: float = 0.3) -> LabelledGraph:
        graph = LabelledGraph(directed=True)
        for v in range(n):
            graph.add_node(v)
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < density:
                    graph.add_edge(u, v, labels[int(rng.integers(len(labels)))])
        return graph

    return build


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)

"""Tests for path utility functions."""

import math

import numpy as np

from optipath.graphs import (
    CAPACITY,
    DISTANCE,
    LabelledGraph,
    floyd_warshall,
    node_index_map,
    path_label,
    reconstruct_path,
    table_to_matrix,
)


class TestNodeIndexMap:
    """Tests for node_index_map function."""

    def test_node_index_map_simple(self):
        """Test node index mapping on simple list."""
        node_to_idx, idx_to_node = node_index_map(["C", "A", "B"])

        assert node_to_idx == {"A": 0, "B": 1, "C": 2}
        assert idx_to_node == ["A", "B", "C"]

    def test_node_index_map_duplicates(self):
        """Test that duplicates are handled."""
        node_to_idx, idx_to_node = node_index_map(["A", "B", "A", "C"])

        assert len(node_to_idx) == 3
        assert idx_to_node == ["A", "B", "C"]


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path(self):
        parent = {"B": "A", "C": "B"}
        assert reconstruct_path(parent, "A", "C") == ["A", "B", "C"]

    def test_reconstruct_path_source(self):
        assert reconstruct_path({}, "A", "A") == ["A"]

    def test_reconstruct_path_unreachable(self):
        parent = {"B": "A"}
        assert reconstruct_path(parent, "A", "D") == []

    def test_reconstruct_path_other_root(self):
        """A walk that ends at a vertex other than the source yields no path."""
        parent = {"C": "X"}
        assert reconstruct_path(parent, "A", "C") == []

    def test_reconstruct_path_cycle(self):
        parent = {"B": "C", "C": "B"}
        assert reconstruct_path(parent, "A", "B") == []


class TestPathLabel:
    """Tests for path_label function."""

    def test_path_label(self):
        G = LabelledGraph.from_edges([("a", "b", 3), ("b", "c", 1)])

        assert path_label(G, ["a", "b", "c"], DISTANCE) == 4
        assert path_label(G, ["a", "b", "c"], CAPACITY) == 1

    def test_path_label_trivial_paths(self):
        G = LabelledGraph.from_edges([("a", "b", 3)])

        assert path_label(G, ["a"], DISTANCE) == 0
        assert path_label(G, [], DISTANCE) == math.inf

    def test_path_label_missing_edge(self):
        G = LabelledGraph.from_edges([("a", "b", 3)])

        assert path_label(G, ["b", "a"], DISTANCE) == math.inf


class TestTableToMatrix:
    """Tests for table_to_matrix function."""

    def test_table_to_matrix(self):
        G = LabelledGraph.from_edges([("a", "c", 5), ("a", "b", 3), ("b", "c", 1)])

        matrix, order = table_to_matrix(floyd_warshall(G))

        assert order == ["a", "b", "c"]
        assert matrix.shape == (3, 3)
        assert matrix.dtype == np.float64
        np.testing.assert_array_equal(
            matrix,
            np.array(
                [
                    [0.0, 3.0, 4.0],
                    [np.inf, 0.0, 1.0],
                    [np.inf, np.inf, 0.0],
                ]
            ),
        )

    def test_table_to_matrix_subset(self):
        G = LabelledGraph.from_edges([("a", "c", 5), ("a", "b", 3), ("b", "c", 1)])

        matrix, order = table_to_matrix(floyd_warshall(G), nodes=["c", "a"])

        assert order == ["a", "c"]
        np.testing.assert_array_equal(matrix, np.array([[0.0, 4.0], [np.inf, 0.0]]))

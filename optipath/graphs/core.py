"""
Core graph data structures.

Provides the read-only adjacency interface consumed by the path algorithms
and LabelledGraph, an adjacency-map implementation of it. Vertices and
neighbors are returned in sorted order for deterministic behavior, so
vertices must be mutually comparable.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Protocol, Tuple


class AdjacencyGraph(Protocol):
    """
    Read-only view of a directed, edge-labelled graph.

    This is everything the path algorithms need from a graph: the vertex
    set, the outgoing (neighbor, label) pairs of a vertex, and membership.
    Each ordered vertex pair carries at most one label.
    """

    def vertices(self) -> List[Hashable]:
        ...

    def neighbors(self, vertex: Hashable) -> List[Tuple[Hashable, Any]]:
        ...

    def has_vertex(self, vertex: Hashable) -> bool:
        ...


@dataclass
class LabelledGraph:
    """
    Edge-labelled graph with adjacency-map representation.

    Supports directed and undirected graphs. Parallel edges are collapsed
    when added: with a ``merge`` function (typically a dioid's ``combine``)
    the labels are merged, otherwise the newer label replaces the older one.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.
        merge: Optional binary function used to merge parallel edge labels.
        adj: Adjacency map vertex -> (neighbor -> label).

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(1) amortized
        - neighbors: O(deg(v) log deg(v)) (sorted)
        - vertices: O(V log V) (sorted)
        - edges: O(E log E)
    """

    directed: bool = True
    merge: Optional[Callable[[Any, Any], Any]] = None
    adj: Dict[Hashable, Dict[Hashable, Any]] = field(default_factory=dict)

    def __init__(
        self, directed: bool = True, merge: Optional[Callable[[Any, Any], Any]] = None
    ):
        """
        Initialize an empty labelled graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            merge: Optional function merging the labels of parallel edges.
        """
        self.directed = directed
        self.merge = merge
        self.adj = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable, Any]],
        vertices: Iterable[Hashable] = (),
        directed: bool = True,
        merge: Optional[Callable[[Any, Any], Any]] = None,
    ) -> "LabelledGraph":
        """
        Build a graph from (u, v, label) triples plus optional isolated vertices.

        Example:
            >>> G = LabelledGraph.from_edges([("a", "b", 5)], vertices=["z"])
            >>> G.vertices()
            ['a', 'b', 'z']
        """
        graph = cls(directed=directed, merge=merge)
        for vertex in vertices:
            graph.add_node(vertex)
        for u, v, label in edges:
            graph.add_edge(u, v, label)
        return graph

    def add_node(self, node: Hashable) -> None:
        """
        Add a vertex to the graph.

        Args:
            node: Hashable, orderable vertex identifier.
        """
        if node not in self.adj:
            self.adj[node] = {}

    def add_edge(self, u: Hashable, v: Hashable, label: Any) -> None:
        """
        Add a labelled edge from u to v.

        For undirected graphs, also adds the edge from v to u with the same
        label.

        Args:
            u: Source vertex.
            v: Target vertex.
            label: Edge label.
        """
        self.add_node(u)
        self.add_node(v)
        self._put(u, v, label)
        if not self.directed and u != v:
            self._put(v, u, label)

    def _put(self, u: Hashable, v: Hashable, label: Any) -> None:
        out = self.adj[u]
        if v in out and self.merge is not None:
            out[v] = self.merge(out[v], label)
        else:
            out[v] = label

    def has_vertex(self, node: Hashable) -> bool:
        return node in self.adj

    def __contains__(self, node: Hashable) -> bool:
        return node in self.adj

    def __len__(self) -> int:
        return len(self.adj)

    def vertices(self) -> List[Hashable]:
        """
        Return list of all vertices in sorted order.

        Returns:
            Sorted list of vertices.
        """
        return sorted(self.adj)

    def neighbors(self, node: Hashable) -> List[Tuple[Hashable, Any]]:
        """
        Return outgoing neighbors of a vertex with labels, sorted by neighbor.

        Args:
            node: Vertex to get neighbors for.

        Returns:
            Sorted list of (neighbor, label) tuples.

        Raises:
            KeyError: If node is not in graph.
        """
        if node not in self.adj:
            raise KeyError(f"Node {node} not in graph")
        return sorted(self.adj[node].items(), key=lambda item: item[0])

    def label(self, u: Hashable, v: Hashable, default: Any = None) -> Any:
        """Return the label of edge u -> v, or ``default`` if there is none."""
        return self.adj.get(u, {}).get(v, default)

    def edges(self) -> List[Tuple[Hashable, Hashable, Any]]:
        """
        Return list of all edges with labels.

        For undirected graphs, each edge appears once as (u, v, label) with
        u <= v.

        Returns:
            List of (u, v, label) tuples.
        """
        edges_list = []
        for u in self.vertices():
            for v, label in self.neighbors(u):
                if self.directed or not v < u:
                    edges_list.append((u, v, label))
        return edges_list

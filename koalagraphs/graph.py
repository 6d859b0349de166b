"""A simple graph with integer node identifiers, and graph utilities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import networkx as nx


class Graph:
    """A graph on integer nodes, directed or undirected, optionally weighted.

    Nodes are identified by integers handed out in increasing order.  A
    subgraph keeps the identifiers of the nodes it was built from.
    """

    def __init__(self, n: int = 0, directed: bool = False, weighted: bool = False) -> None:
        if n < 0:
            raise ValueError("number of nodes must not be negative")
        self.directed = directed
        self.weighted = weighted
        self._adj: dict[int, dict[int, float]] = {u: {} for u in range(n)}
        self._bound = n

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"Graph({kind}, weighted={self.weighted}, "
            f"nodes={self.number_of_nodes()}, edges={self.number_of_edges()})"
        )

    def _require(self, u: int) -> None:
        if u not in self._adj:
            raise ValueError(f"node {u} is not in the graph")

    def add_nodes(self, count: int) -> range:
        """Add ``count`` new nodes and return their identifiers."""
        if count < 0:
            raise ValueError("number of nodes must not be negative")
        added = range(self._bound, self._bound + count)
        for u in added:
            self._adj[u] = {}
        self._bound += count
        return added

    def add_edge(self, u: int, v: int, weight: float = 1.0) -> None:
        """Add the edge ``u``-``v``; an existing edge gets the new weight."""
        self._require(u)
        self._require(v)
        w = float(weight) if self.weighted else 1.0
        self._adj[u][v] = w
        if not self.directed:
            self._adj[v][u] = w

    def has_edge(self, u: int, v: int) -> bool:
        return u in self._adj and v in self._adj[u]

    def neighbors(self, u: int) -> list[int]:
        """Return the (out-)neighbours of ``u`` in insertion order."""
        self._require(u)
        return list(self._adj[u])

    def weight(self, u: int, v: int) -> float:
        """Return the weight of edge ``u``-``v``, or 0.0 if there is none."""
        if u not in self._adj:
            return 0.0
        return self._adj[u].get(v, 0.0)

    def increase_weight(self, u: int, v: int, weight: float) -> None:
        """Add ``weight`` to edge ``u``-``v``, inserting the edge if missing."""
        if not self.weighted:
            raise ValueError("cannot change edge weights of an unweighted graph")
        self._require(u)
        self._require(v)
        new_weight = self._adj[u].get(v, 0.0) + float(weight)
        self._adj[u][v] = new_weight
        if not self.directed:
            self._adj[v][u] = new_weight

    def nodes(self) -> list[int]:
        return list(self._adj)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge once; an undirected edge comes as ``(u, v)`` with ``v <= u``."""
        for u, targets in self._adj.items():
            for v in targets:
                if self.directed or v <= u:
                    yield u, v

    def number_of_nodes(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        return sum(1 for _ in self.edges())

    def subgraph(self, nodes: Iterable[int]) -> Graph:
        """Return the subgraph induced by ``nodes``, keeping node identifiers."""
        keep = set(nodes)
        for u in keep:
            self._require(u)
        result = Graph(0, self.directed, self.weighted)
        result._bound = self._bound
        result._adj = {
            u: {v: w for v, w in targets.items() if v in keep}
            for u, targets in self._adj.items()
            if u in keep
        }
        return result

    def to_undirected(self) -> Graph:
        """Return an undirected copy; weights of opposite arcs are added up."""
        if not self.directed:
            return self.subgraph(self._adj)
        result = Graph(0, False, self.weighted)
        result._bound = self._bound
        result._adj = {u: {} for u in self._adj}
        for u, targets in self._adj.items():
            for v, w in targets.items():
                if result.weighted:
                    result.increase_weight(u, v, w)
                else:
                    result.add_edge(u, v)
        return result

    def connected_components(self) -> list[list[int]]:
        """Return the connected components, each sorted, ordered by smallest node."""
        helper = nx.Graph()
        helper.add_nodes_from(self._adj)
        helper.add_edges_from(self.edges())
        components = [sorted(c) for c in nx.connected_components(helper)]
        return sorted(components, key=lambda c: c[0])

    def common_neighbors(self, u: int, v: int) -> list[int]:
        self._require(u)
        self._require(v)
        return [w for w in self._adj[u] if w in self._adj[v]]


def to_complement(graph: Graph) -> Graph:
    """Return the undirected complement of ``graph`` on the same nodes."""
    result = Graph(0, False, False)
    result._bound = graph._bound
    nodes = graph.nodes()
    result._adj = {u: {} for u in nodes}
    for position, u in enumerate(nodes):
        for v in nodes[position + 1:]:
            if not graph.has_edge(u, v):
                result.add_edge(u, v)
    return result
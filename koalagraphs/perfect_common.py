"""Helpers shared by the perfect graph recognition steps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from koalagraphs.graph import Graph, to_complement


def is_complete(graph: Graph, vertices: Sequence[int], v: int) -> bool:
    """Tell whether ``v`` lies outside ``vertices`` and is adjacent to every one of them."""
    return all(v != x and graph.has_edge(v, x) for x in vertices)


def all_complete_vertices(graph: Graph, vertices: Iterable[int]) -> list[int]:
    """Return every node of ``graph`` that is complete to ``vertices``."""
    chosen = list(vertices)
    return [v for v in graph.nodes() if is_complete(graph, chosen, v)]


def auxiliary_components(graph: Graph, vertices: Iterable[int]) -> list[list[int]]:
    """Return the anticomponents of the set of nodes complete to ``vertices``.

    These are the connected components of the complement of the subgraph
    induced by the nodes complete to ``vertices``.
    """
    complete = all_complete_vertices(graph, vertices)
    return to_complement(graph.subgraph(complete)).connected_components()
"""Detection of odd holes that have a near-cleaner among candidate sets."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from koalagraphs.graph import Graph
from koalagraphs.paths import PathMode, iter_paths
from koalagraphs.perfect_common import all_complete_vertices, auxiliary_components

MAX_NODES = 512

Distances = dict[int, dict[int, float]]
Penultimate = dict[int, dict[int, int]]


def _induced_triples(graph: Graph) -> list[list[int]]:
    if graph.number_of_nodes() < 3:
        return []
    return list(iter_paths(graph, 3, PathMode.INDUCED_PATH))


def _shortest_paths(
    graph: Graph, usable: Callable[[int], bool]
) -> tuple[Distances, Penultimate]:
    """All-pairs shortest paths whose inner nodes are all ``usable``."""
    nodes = graph.nodes()
    dist: Distances = {i: {j: math.inf for j in nodes} for i in nodes}
    penultimate: Penultimate = {i: {} for i in nodes}
    for i in nodes:
        dist[i][i] = 0
    for i, j in graph.edges():
        dist[i][j] = dist[j][i] = 1
        penultimate[i][j], penultimate[j][i] = i, j
    for k in nodes:
        if not usable(k):
            continue
        row_k = dist[k]
        for i in nodes:
            if i == k:
                continue
            row_i = dist[i]
            via = row_i[k]
            if via == math.inf:
                continue
            for j in nodes:
                if j != i and j != k and row_i[j] > via + row_k[j]:
                    row_i[j] = via + row_k[j]
                    penultimate[i][j] = penultimate[k][j]
    return dist, penultimate


def _odd_hole_with_near_cleaner(
    graph: Graph, cleaner: frozenset[int], triples: list[list[int]]
) -> bool:
    dist, penultimate = _shortest_paths(graph, lambda v: v not in cleaner)
    for y1 in graph.nodes():
        if y1 in cleaner:
            continue
        for triple in triples:
            if y1 in triple:
                continue
            x1, x3, x2 = triple
            if dist[x1][y1] == math.inf or dist[x2][y1] == math.inf:
                continue
            y2 = penultimate[x2][y1]
            n = dist[x2][y1]
            if dist[x1][y1] + 1 != n or dist[x1][y2] != n:
                continue
            if dist[x3][y1] < n or dist[x3][y2] < n:
                continue
            return True
    return False


def _is_relevant_triple(graph: Graph, a: int, b: int, c: int) -> bool:
    return not (
        a == b
        or graph.has_edge(a, b)
        or (graph.has_edge(a, c) and graph.has_edge(b, c))
    )


def _x_for_relevant_triple(graph: Graph, a: int, b: int, c: int) -> frozenset[int]:
    components = auxiliary_components(graph, [a, b])

    def has_non_neighbour_of_c(component: Iterable[int]) -> bool:
        return any(not graph.has_edge(c, v) for v in component)

    threshold = 0
    for component in components:
        if len(component) > threshold and has_non_neighbour_of_c(component):
            threshold = len(component)
    large = [v for component in components if len(component) > threshold for v in component]
    first = next((comp for comp in components if has_non_neighbour_of_c(comp)), [])
    complete = all_complete_vertices(graph, [*first, c, *large])
    return frozenset(large) | frozenset(complete)


def _near_cleaner_candidates(graph: Graph) -> set[frozenset[int]]:
    edge_sets = [
        frozenset(all_complete_vertices(graph, [u, v])) for u, v in graph.edges()
    ]
    nodes = graph.nodes()
    triple_sets = [
        _x_for_relevant_triple(graph, a, b, c)
        for position, a in enumerate(nodes)
        for b in nodes[position + 1:]
        if not graph.has_edge(a, b)
        for c in nodes
        if _is_relevant_triple(graph, a, b, c)
    ]
    return {x | n for n in edge_sets for x in triple_sets}


def contains_near_cleaner_odd_hole(graph: Graph) -> bool:
    """Tell whether an odd hole is found with one of the candidate near-cleaners.

    Raises ValueError for graphs whose node identifiers reach 512.
    """
    if max(graph.nodes(), default=-1) + 1 >= MAX_NODES:
        raise ValueError("Algorithm cannot be run for graphs on more than 512 vertices")
    triples = _induced_triples(graph)
    if not triples:
        return False
    return any(
        _odd_hole_with_near_cleaner(graph, cleaner, triples)
        for cleaner in _near_cleaner_candidates(graph)
    )
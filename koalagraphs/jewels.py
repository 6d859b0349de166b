"""Detection of jewels, one of the simple prohibited structures of Berge graphs."""

from __future__ import annotations

from collections.abc import Sequence

from koalagraphs.graph import Graph
from koalagraphs.paths import PathMode, iter_paths
from koalagraphs.traversal import bfs

_CYCLE_EDGES = ((0, 1), (1, 2), (2, 3), (3, 4), (4, 0))
_CHORD_FREE = ((0, 2), (1, 3), (0, 3))


def is_jewel(graph: Graph, vertices: Sequence[int]) -> bool:
    """Tell whether five ``vertices`` form a jewel in ``graph``.

    The vertices must form a cycle v0..v4 without the chords v0v2, v1v3 and
    v0v3, and v0 must reach v3 through nodes that neither are nor touch
    v1, v2 or v4.
    """
    v = list(vertices)
    if len(v) != 5 or len(set(v)) != 5:
        return False
    if not all(graph.has_edge(v[i], v[j]) for i, j in _CYCLE_EDGES):
        return False
    if any(graph.has_edge(v[i], v[j]) for i, j in _CHORD_FREE):
        return False

    blocked = {v[1], v[2], v[4]}

    def allowed(u: int) -> bool:
        return u not in blocked and not any(w in blocked for w in graph.neighbors(u))

    return bfs(graph, v[0], v[3], allowed)


def contains_jewel(graph: Graph) -> bool:
    """Tell whether ``graph`` contains a jewel."""
    if graph.number_of_nodes() < 5:
        return False
    for path in iter_paths(graph, 4, PathMode.INDUCED_PATH):
        for v5 in graph.common_neighbors(path[0], path[-1]):
            if is_jewel(graph, [*path, v5]):
                return True
    return False
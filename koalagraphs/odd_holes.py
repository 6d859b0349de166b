"""Detection of holes and of the T1, T2 and T3 structures of non-Berge graphs."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from koalagraphs.graph import Graph
from koalagraphs.paths import PathMode, iter_paths
from koalagraphs.perfect_common import auxiliary_components, is_complete
from koalagraphs.traversal import bfs, dfs_from

_T3_EDGES = ((0, 1), (0, 3), (1, 2), (2, 3), (2, 4), (3, 5))
_T3_NON_EDGES = ((0, 2), (0, 4), (0, 5), (1, 3), (1, 4), (1, 5), (3, 4))


def is_path(graph: Graph, path: Sequence[int]) -> bool:
    """Tell whether ``path`` is an induced path of ``graph``."""
    vertices = list(path)
    for position, (u, v) in enumerate(zip(vertices, vertices[1:])):
        if not graph.has_edge(u, v):
            return False
        if any(graph.has_edge(u, w) for w in vertices[position + 2:]):
            return False
    return True


def contains_odd_hole(graph: Graph) -> bool:
    """Tell whether ``graph`` has an induced odd cycle of length at least five."""
    if graph.number_of_nodes() < 5:
        return False
    holes = iter_paths(graph, sys.maxsize, PathMode.INDUCED_ODD_HOLE)
    return next(holes, None) is not None


def contains_hole(graph: Graph, length: int) -> bool:
    """Tell whether ``graph`` has an induced cycle on exactly ``length`` vertices."""
    if length <= 3 or graph.number_of_nodes() < length:
        return False
    cycles = iter_paths(graph, length, PathMode.INDUCED_CYCLE)
    return next(cycles, None) is not None


def contains_t1(graph: Graph) -> bool:
    """Tell whether ``graph`` has a hole of length five."""
    return contains_hole(graph, 5)


def _has_t2_path(graph: Graph, v1: int, v2: int, v3: int, v4: int) -> bool:
    for component in auxiliary_components(graph, [v1, v2, v4]):
        if not component:
            continue

        def allowed(v: int, component: list[int] = component) -> bool:
            if v in (v2, v3):
                return False
            if graph.has_edge(v, v2) or graph.has_edge(v, v3):
                return False
            return not is_complete(graph, component, v)

        if bfs(graph, v1, v4, allowed):
            return True
    return False


def contains_t2(graph: Graph) -> bool:
    """Tell whether ``graph`` contains a T2 structure."""
    for v1 in graph.nodes():
        for v2 in graph.neighbors(v1):
            for v3 in graph.neighbors(v2):
                if v3 == v1:
                    continue
                for v4 in graph.neighbors(v3):
                    if v4 in (v1, v2) or not is_path(graph, [v1, v2, v3, v4]):
                        continue
                    if _has_t2_path(graph, v1, v2, v3, v4):
                        return True
    return False


def is_t3(
    graph: Graph,
    vertices: Sequence[int],
    path: Sequence[int],
    anticomponent: Sequence[int],
) -> bool:
    """Tell whether six ``vertices``, a ``path`` and an ``anticomponent`` form a T3."""
    v = list(vertices)
    p = list(path)
    x = list(anticomponent)
    if len(v) != 6 or not p or not x or len(set(v)) != 6:
        return False
    if not all(graph.has_edge(v[i], v[j]) for i, j in _T3_EDGES):
        return False
    if any(graph.has_edge(v[i], v[j]) for i, j in _T3_NON_EDGES):
        return False
    x_sorted = sorted(x)
    components = auxiliary_components(graph, [v[0], v[1], v[4]])
    if not any(sorted(component) == x_sorted for component in components):
        return False
    if is_complete(graph, x, v[2]) or is_complete(graph, x, v[3]):
        return False
    if (p[0], p[-1]) not in ((v[4], v[5]), (v[5], v[4])):
        return False
    if not is_path(graph, p):
        return False
    head, members = set(v[:4]), set(x)
    for inner in p[1:-1]:
        if inner in head or inner in members or is_complete(graph, x, inner):
            return False
        if graph.has_edge(v[0], inner) or graph.has_edge(v[1], inner):
            return False
    return not graph.has_edge(v[4], v[5]) or not is_complete(graph, x, v[5])


def _t3_region(graph: Graph, v1: int, v2: int, v5: int, x: list[int]) -> set[int]:
    """Return F: the region reachable from v5 plus its X-complete attachments."""

    def allowed(v: int) -> bool:
        return (
            not graph.has_edge(v1, v)
            and not graph.has_edge(v2, v)
            and not is_complete(graph, x, v)
        )

    reachable = set(dfs_from(graph, v5, allowed))
    region = set(reachable)
    for f in reachable:
        for v in graph.neighbors(f):
            if v in region or not is_complete(graph, x, v):
                continue
            if not any(graph.has_edge(v, w) for w in (v1, v2, v5)):
                region.add(v)
    return region


def _closes_t3(graph: Graph, v1: int, v2: int, v5: int, x: list[int]) -> bool:
    region = _t3_region(graph, v1, v2, v5, x)
    for v4 in graph.neighbors(v1):
        if graph.has_edge(v4, v2) or graph.has_edge(v4, v5):
            continue
        if not any(graph.has_edge(v4, f) for f in region):
            continue
        if all(graph.has_edge(v4, w) for w in x):
            continue
        for v3 in graph.neighbors(v2):
            if not graph.has_edge(v3, v4) or not graph.has_edge(v3, v5):
                continue
            if graph.has_edge(v3, v1):
                continue
            if all(graph.has_edge(v3, w) for w in x):
                continue
            return True
    return False


def contains_t3(graph: Graph) -> bool:
    """Tell whether ``graph`` contains a T3 structure."""
    for v1 in graph.nodes():
        for v2 in graph.neighbors(v1):
            for v5 in graph.nodes():
                if v5 in (v1, v2) or graph.has_edge(v5, v1) or graph.has_edge(v5, v2):
                    continue
                for component in auxiliary_components(graph, [v1, v2, v5]):
                    if component and _closes_t3(graph, v1, v2, v5, component):
                        return True
    return False
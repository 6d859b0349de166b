"""Detection of pyramids, one of the simple prohibited structures of Berge graphs."""

from __future__ import annotations

import itertools
from collections import defaultdict
from collections.abc import Iterator, Sequence

from koalagraphs.graph import Graph
from koalagraphs.traversal import bfs_path

_PAIRS = ((0, 1), (1, 2), (2, 0))


def generate_tuples(size: int, maximum: int) -> list[list[int]]:
    """Return every ``size``-tuple over ``range(maximum)``, first position changing fastest.

    A ``maximum`` below 1 yields only the all-zero tuple.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    values = range(max(maximum, 1))
    return [list(reversed(t)) for t in itertools.product(values, repeat=size)]


def _check_prerequisites(
    graph: Graph, apex: int, base: Sequence[int], star: Sequence[int]
) -> bool:
    for i in range(3):
        for j in range(3):
            if i == j:
                continue
            if base[i] == star[j]:
                return False
            if (base[j] != star[j] and graph.has_edge(base[i], star[j])) or graph.has_edge(
                star[i], star[j]
            ):
                return False
    apex_touches_base = False
    for i in range(3):
        if not graph.has_edge(apex, star[i]):
            return False
        if graph.has_edge(apex, base[i]):
            if apex_touches_base or base[i] != star[i]:
                return False
            apex_touches_base = True
    return True


def _triangles(graph: Graph) -> Iterator[tuple[int, int, int]]:
    for i in graph.nodes():
        for j in graph.neighbors(i):
            for k in graph.neighbors(j):
                if i < j < k and graph.has_edge(i, k):
                    yield i, j, k


def _empty_star_triangles(graph: Graph) -> Iterator[tuple[int, tuple[int, int, int]]]:
    for a in graph.nodes():
        neighbours = graph.neighbors(a)
        for s1 in neighbours:
            for s2 in neighbours:
                if s2 == s1 or graph.has_edge(s1, s2):
                    continue
                for s3 in neighbours:
                    if s3 in (s1, s2) or graph.has_edge(s1, s3) or graph.has_edge(s2, s3):
                        continue
                    yield a, (s1, s2, s3)


def _candidate_paths(
    graph: Graph, base: Sequence[int], star: Sequence[int], marked: set[int]
) -> list[dict[int, list[int]]]:
    """For each side i, map a middle node m to a path from star[i] through m to base[i]."""
    paths: list[dict[int, list[int]]] = [{}, {}, {}]
    for i in range(3):
        if star[i] == base[i]:
            paths[i][base[i]] = [base[i]]
            continue
        others = [j for j in range(3) if j != i]

        def touches_others(v: int, others: list[int] = others) -> bool:
            return any(graph.has_edge(star[j], v) or graph.has_edge(v, base[j]) for j in others)

        for m in graph.nodes():

            def allowed(v: int, i: int = i, m: int = m) -> bool:
                if v == star[i] or v == m:
                    return True
                if v in marked:
                    return False
                return not touches_others(v)

            head = bfs_path(graph, star[i], m, allowed)
            tail = bfs_path(graph, m, base[i], allowed)
            if not head or not tail:
                continue
            if m not in marked and touches_others(m):
                continue
            inner_head, inner_tail = head[:-1], tail[1:]
            tail_set = set(inner_tail)
            if tail_set.intersection(inner_head):
                continue
            if any(w in tail_set for u in inner_head for w in graph.neighbors(u)):
                continue
            paths[i][m] = head + inner_tail
    return paths


def _good_pairs(
    graph: Graph, paths: list[dict[int, list[int]]], marked: set[int]
) -> list[set[tuple[int, int]]]:
    good: list[set[tuple[int, int]]] = [set(), set(), set()]
    for u, v in _PAIRS:
        for m1, first in paths[u].items():
            color: set[int] = set()
            for x in first:
                if x in marked:
                    continue
                color.add(x)
                color.update(graph.neighbors(x))
            for m2, second in paths[v].items():
                if not any(x in color for x in second):
                    good[u].add((m1, m2))
    return good


def _closes_triangle(good: list[set[tuple[int, int]]]) -> bool:
    successors: dict[int, list[int]] = defaultdict(list)
    for m1, m2 in good[1]:
        successors[m1].append(m2)
    return any(
        (m2, m0) in good[2] for m0, m1 in good[0] for m2 in successors.get(m1, ())
    )


def is_pyramid(
    graph: Graph, apex: int, base: Sequence[int], paths: Sequence[Sequence[int]]
) -> bool:
    """Tell whether ``apex``, the triangle ``base`` and three ``paths`` form a pyramid.

    Path i runs from a neighbour of the apex to ``base[i]``.
    """
    base = list(base)
    paths = [list(p) for p in paths]
    if len(base) != 3 or len(paths) != 3:
        return False
    if any(not p for p in paths):
        return False
    for i, j in itertools.combinations(range(3), 2):
        if base[i] == base[j] or not graph.has_edge(base[i], base[j]):
            return False
        if paths[i][0] == paths[j][0] or graph.has_edge(paths[i][0], paths[j][0]):
            return False
    for i in range(3):
        if not graph.has_edge(apex, paths[i][0]) or paths[i][-1] != base[i]:
            return False
    for p in paths:
        if not all(graph.has_edge(x, y) for x, y in zip(p, p[1:])):
            return False
    for i, j in itertools.combinations(range(3), 2):
        crossing = sum(1 for x in paths[i] for y in paths[j] if graph.has_edge(x, y))
        if crossing != 1:
            return False
    return sum(1 for v in base if graph.has_edge(apex, v)) <= 1


def contains_pyramid(graph: Graph) -> bool:
    """Tell whether ``graph`` contains a pyramid."""
    triangles = list(_triangles(graph))
    stars = list(_empty_star_triangles(graph))
    for base in triangles:
        for apex, star in stars:
            if not _check_prerequisites(graph, apex, base, star):
                continue
            marked = set(star) | set(base)
            paths = _candidate_paths(graph, base, star, marked)
            if _closes_triangle(_good_pairs(graph, paths, marked)):
                return True
    return False
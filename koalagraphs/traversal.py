"""Breadth- and depth-first searches restricted by a node predicate."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Optional

from koalagraphs.graph import Graph

Predicate = Callable[[int], bool]


def _accepts(predicate: Optional[Predicate], v: int) -> bool:
    return predicate is None or bool(predicate(v))


def bfs(
    graph: Graph, source: int, target: int, predicate: Optional[Predicate] = None
) -> bool:
    """Tell whether ``target`` is reachable from ``source`` through nodes accepted by ``predicate``."""
    queue = deque([source])
    marked = {source}
    while queue:
        u = queue.popleft()
        if u == target:
            return True
        for v in graph.neighbors(u):
            if v not in marked and (v == target or _accepts(predicate, v)):
                marked.add(v)
                queue.append(v)
    return False


def bfs_path(
    graph: Graph, source: int, target: int, predicate: Optional[Predicate] = None
) -> list[int]:
    """Return a shortest path from ``source`` to ``target`` through accepted nodes, or ``[]``."""
    queue = deque([source])
    parent = {source: source}
    while queue:
        u = queue.popleft()
        if u == target:
            break
        for v in graph.neighbors(u):
            if v not in parent and (v == target or _accepts(predicate, v)):
                parent[v] = u
                queue.append(v)
    if target not in parent:
        return []
    path = [target]
    v = target
    while parent[v] != v:
        v = parent[v]
        path.append(v)
    path.reverse()
    return path


def dfs_from(
    graph: Graph, source: int, predicate: Optional[Predicate] = None
) -> Iterator[int]:
    """Yield nodes reachable from ``source`` through accepted nodes, in depth-first order."""
    stack = [source]
    marked = {source}
    while stack:
        u = stack.pop()
        yield u
        for v in graph.neighbors(u):
            if v not in marked and _accepts(predicate, v):
                marked.add(v)
                stack.append(v)
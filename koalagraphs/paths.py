"""Enumeration of induced paths, induced cycles and odd holes."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from koalagraphs.graph import Graph


class PathMode(enum.Enum):
    INDUCED_PATH = "induced_path"
    INDUCED_CYCLE = "induced_cycle"
    INDUCED_ODD_HOLE = "induced_odd_hole"


def _check_last_vertex(graph: Graph, path: list, mode: PathMode) -> bool:
    """Tell whether the last vertex extends ``path`` validly for ``mode``."""
    if mode is PathMode.INDUCED_CYCLE:
        if len(path) <= 2:
            return False
    elif mode is PathMode.INDUCED_ODD_HOLE:
        if len(path) <= 3 or len(path) % 2 == 0:
            return False
    elif len(path) <= 1:
        return False
    last = path[-1]
    if last is None or len(set(path)) < len(path):
        return False
    previous, first = path[-2], path[0]
    closes = mode in (PathMode.INDUCED_CYCLE, PathMode.INDUCED_ODD_HOLE)
    for v in path:
        if v == previous:
            if not graph.has_edge(previous, last):
                return False
        elif v == first:
            if closes and not graph.has_edge(v, last):
                return False
            if mode is PathMode.INDUCED_PATH and graph.has_edge(v, last):
                return False
        elif v != last and graph.has_edge(v, last):
            return False
    return True


class _Walker:
    def __init__(self, graph: Graph, length: int, mode: PathMode) -> None:
        self.graph = graph
        self.mode = mode
        self.order = graph.nodes()
        self.length = min(length, len(self.order))
        self.neighbors = {u: graph.neighbors(u) for u in self.order}
        self.position = {
            u: {v: i for i, v in enumerate(nbrs)} for u, nbrs in self.neighbors.items()
        }
        self.path: list = [self.order[0]] if self.order else []

    def _ith_neighbor(self, u: int, i: int):
        nbrs = self.neighbors[u]
        return nbrs[i] if i < len(nbrs) else None

    def _next_neighbor(self, u: int, v: int):
        return self._ith_neighbor(u, self.position[u][v] + 1)

    def _extends(self, mode: PathMode) -> bool:
        path = self.path
        return path[0] < path[-1] and _check_last_vertex(self.graph, path, mode)

    def advance(self) -> bool:
        path, mode, graph = self.path, self.mode, self.graph
        while True:
            if path[-1] is None:
                path.pop()
                if len(path) == 1:
                    index = self.order.index(path[0]) + 1
                    if index == len(self.order):
                        return False
                    path[-1] = self.order[index]
                else:
                    path[-1] = self._next_neighbor(path[-2], path[-1])
                continue
            if len(path) < self.length:
                if len(path) > 1:
                    while path[-1] is not None:
                        if mode is PathMode.INDUCED_PATH:
                            if _check_last_vertex(graph, path, PathMode.INDUCED_PATH):
                                break
                        elif mode is PathMode.INDUCED_CYCLE:
                            if self._extends(PathMode.INDUCED_PATH):
                                break
                        else:
                            if self._extends(PathMode.INDUCED_ODD_HOLE):
                                return True
                            if self._extends(PathMode.INDUCED_PATH):
                                break
                        path[-1] = self._next_neighbor(path[-2], path[-1])
                    if path[-1] is None:
                        continue
                path.append(self._ith_neighbor(path[-1], 0))
                if (
                    mode is PathMode.INDUCED_ODD_HOLE or len(path) == self.length
                ) and _check_last_vertex(graph, path, mode):
                    return True
                continue
            while True:
                path[-1] = self._next_neighbor(path[-2], path[-1])
                if path[-1] is None or _check_last_vertex(graph, path, mode):
                    break
            if path[-1] is not None:
                return True


def iter_paths(graph: Graph, length: int, mode: PathMode = PathMode.INDUCED_PATH) -> Iterator[list[int]]:
    """Yield vertex sequences of ``length`` vertices (capped at the graph size) for ``mode``.

    In ``INDUCED_PATH`` and ``INDUCED_CYCLE`` mode every induced path, or cycle,
    is yielded in turn.  In ``INDUCED_ODD_HOLE`` mode the length is only an
    upper bound and at most one odd hole is yielded.
    """
    if length < 2:
        raise ValueError("length must be at least 2")
    if graph.number_of_nodes() == 0:
        return
    walker = _Walker(graph, length, mode)
    while walker.advance():
        yield list(walker.path)
        if mode is PathMode.INDUCED_ODD_HOLE:
            return
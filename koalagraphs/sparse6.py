"""Reading and writing undirected graphs in the sparse6 format."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from koalagraphs.graph import Graph
from koalagraphs.graph6 import (
    _LOW,
    _WORD,
    PathLike,
    _decode_size,
    _encode_size,
    _read_first_line,
    _value,
    _write_line,
)

_PREFIX = ":"


class _BitSource:
    """Reads fixed-width fields from a sequence of format characters."""

    def __init__(self, data: str) -> None:
        self._chars: Iterator[str] = iter(data)
        self._bits = 0
        self._length = 0

    def take(self, width: int) -> Optional[int]:
        """Return the next ``width`` bits as a number, or None if the data runs out."""
        while self._length < width:
            char = next(self._chars, None)
            if char is None:
                return None
            self._bits = (self._bits << _WORD) | _value(char)
            self._length += _WORD
        self._length -= width
        value = self._bits >> self._length
        self._bits &= (1 << self._length) - 1
        return value


class _BitSink:
    """Collects fixed-width fields and emits them as format characters."""

    def __init__(self) -> None:
        self.chars: list[str] = []
        self.bits = 0
        self.length = 0

    def push(self, value: int, width: int) -> None:
        self.bits = (self.bits << width) | value
        self.length += width
        while self.length >= _WORD:
            self.length -= _WORD
            self.chars.append(chr(_LOW + (self.bits >> self.length)))
            self.bits &= (1 << self.length) - 1


def parse_s6(line: str) -> Graph:
    """Build the undirected graph, loops allowed, encoded by a sparse6 string."""
    if not line.startswith(_PREFIX):
        raise ValueError("sparse6 data must start with ':'")
    nodes, position = _decode_size(line, len(_PREFIX))
    graph = Graph(nodes, directed=False, weighted=False)
    width = max(nodes - 1, 0).bit_length()
    source = _BitSource(line[position:])
    v = 0
    while True:
        flag = source.take(1)
        if flag is None:
            break
        v += flag
        u = source.take(width)
        if u is None or u >= nodes or v >= nodes:
            break
        if u > v:
            v = u
        else:
            graph.add_edge(u, v)
    return graph


def read_s6(path: PathLike) -> Graph:
    """Read the graph stored on the first line of a sparse6 file."""
    return parse_s6(_read_first_line(path))


def format_s6(graph: Graph) -> str:
    """Return the sparse6 encoding of ``graph``."""
    nodes = graph.nodes()
    n = len(nodes)
    index = {u: i for i, u in enumerate(nodes)}
    width = max(n - 1, 0).bit_length() + 1
    flag = 1 << (width - 1)

    sink = _BitSink()
    previous = 0
    for v in nodes:
        iv = index[v]
        for u in graph.neighbors(v):
            iu = index[u]
            if iu > iv:
                continue
            if iv == previous:
                sink.push(iu, width)
            elif iv == previous + 1:
                sink.push(flag | iu, width)
            else:
                sink.push(flag | iv, width)
                sink.push(iu, width)
            previous = iv

    if sink.length > 0:
        special = int(n == flag and previous == n - 2)
        free = _WORD - sink.length
        padding = (sink.bits << free) | ((1 << (free - special)) - 1)
        sink.chars.append(chr(_LOW + padding))
    return _PREFIX + _encode_size(n) + "".join(sink.chars)


def write_s6(graph: Graph, path: PathLike) -> None:
    """Write ``graph`` as a single sparse6 line to ``path``."""
    _write_line(path, format_s6(graph))
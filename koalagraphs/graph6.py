"""Reading and writing undirected graphs in the graph6 format."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Union

from koalagraphs.graph import Graph

PathLike = Union[str, "os.PathLike[str]"]

_LOW = 0x3F
_HIGH = 0x7E
_WORD = 6
_SHORT_NODES = 63
_LONG_NODES = 258048


def _value(char: str) -> int:
    """Return the 6-bit value carried by a printable format character."""
    code = ord(char)
    if not _LOW <= code <= _HIGH:
        raise ValueError(f"invalid character {char!r}")
    return code - _LOW


def _encode_size(n: int) -> str:
    """Encode a node count as the format's size prefix."""
    prefix, width = "", 1
    if n >= _SHORT_NODES:
        prefix, width = chr(_HIGH), 2
        if n >= _LONG_NODES:
            prefix, width = chr(_HIGH) * 2, 6
    digits = (chr(_LOW + ((n >> (_WORD * i)) & _LOW)) for i in reversed(range(width)))
    return prefix + "".join(digits)


def _decode_size(line: str, start: int) -> tuple[int, int]:
    """Decode the size prefix at ``start``; return the node count and the next position."""
    position, width = start, 1
    if position < len(line) and ord(line[position]) >= _HIGH:
        width, position = 2, position + 1
        if position < len(line) and ord(line[position]) >= _HIGH:
            width, position = 6, position + 1
    digits = line[position:position + width]
    if len(digits) < width:
        raise ValueError("missing node count")
    nodes = 0
    for char in digits:
        nodes = (nodes << _WORD) | _value(char)
    return nodes, position + width


def _unpack_bits(data: str) -> Iterator[int]:
    """Yield the bits of ``data``, most significant bit of each character first."""
    for char in data:
        value = _value(char)
        for shift in reversed(range(_WORD)):
            yield (value >> shift) & 1


def _pack_bits(positions: Iterable[int], count: int) -> str:
    """Pack the set bit ``positions`` of a ``count``-bit vector into format characters."""
    words = bytearray(count // _WORD + 1)
    for position in positions:
        words[position // _WORD] |= 0x20 >> (position % _WORD)
    return "".join(chr(_LOW + word) for word in words)


def _read_first_line(path: PathLike) -> str:
    with open(path, encoding="ascii") as handle:
        return handle.readline().rstrip("\r\n")


def _write_line(path: PathLike, text: str) -> None:
    with open(path, "w", encoding="ascii") as handle:
        handle.write(text + "\n")


def parse_g6(line: str) -> Graph:
    """Build the undirected graph encoded by a graph6 string."""
    nodes, position = _decode_size(line, 0)
    graph = Graph(nodes, directed=False, weighted=False)
    bits = _unpack_bits(line[position:])
    for v in range(1, nodes):
        for u in range(v):
            bit = next(bits, None)
            if bit is None:
                raise ValueError("truncated graph6 data")
            if bit:
                graph.add_edge(u, v)
    return graph


def read_g6(path: PathLike) -> Graph:
    """Read the graph stored on the first line of a graph6 file."""
    return parse_g6(_read_first_line(path))


def format_g6(graph: Graph) -> str:
    """Return the graph6 encoding of ``graph``."""
    nodes = graph.nodes()
    n = len(nodes)
    index = {u: i for i, u in enumerate(nodes)}
    positions = (
        index[v] * (index[v] - 1) // 2 + index[u]
        for v in nodes
        for u in graph.neighbors(v)
        if index[u] < index[v]
    )
    return _encode_size(n) + _pack_bits(positions, n * (n - 1) // 2)


def write_g6(graph: Graph, path: PathLike) -> None:
    """Write ``graph`` as a single graph6 line to ``path``."""
    _write_line(path, format_g6(graph))
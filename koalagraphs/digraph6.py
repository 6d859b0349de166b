"""Reading and writing directed graphs in the digraph6 format."""

from __future__ import annotations

from koalagraphs.graph import Graph
from koalagraphs.graph6 import (
    PathLike,
    _decode_size,
    _encode_size,
    _pack_bits,
    _read_first_line,
    _unpack_bits,
    _write_line,
)

_PREFIX = "&"


def parse_d6(line: str) -> Graph:
    """Build the directed graph encoded by a digraph6 string."""
    if not line.startswith(_PREFIX):
        raise ValueError("digraph6 data must start with '&'")
    nodes, position = _decode_size(line, len(_PREFIX))
    graph = Graph(nodes, directed=True, weighted=False)
    bits = _unpack_bits(line[position:])
    for u in range(nodes):
        for v in range(nodes):
            bit = next(bits, None)
            if bit is None:
                raise ValueError("truncated digraph6 data")
            if bit:
                graph.add_edge(u, v)
    return graph


def read_d6(path: PathLike) -> Graph:
    """Read the graph stored on the first line of a digraph6 file."""
    return parse_d6(_read_first_line(path))


def format_d6(graph: Graph) -> str:
    """Return the digraph6 encoding of ``graph``; undirected edges become two arcs."""
    nodes = graph.nodes()
    n = len(nodes)
    index = {u: i for i, u in enumerate(nodes)}
    positions = (
        index[u] * n + index[v] for u in nodes for v in graph.neighbors(u)
    )
    return _PREFIX + _encode_size(n) + _pack_bits(positions, n * n)


def write_d6(graph: Graph, path: PathLike) -> None:
    """Write ``graph`` as a single digraph6 line to ``path``."""
    _write_line(path, format_d6(graph))
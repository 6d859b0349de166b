"""Reading and writing graphs in the DIMACS binary format."""

from __future__ import annotations

import os
import re
from typing import Union

from koalagraphs.graph import Graph

PathLike = Union[str, "os.PathLike[str]"]

_HEADER = re.compile(rb"\s*(\d+)")


def _parse_preamble(preamble: str, graph: Graph) -> int:
    nodes = 0
    for raw in preamble.splitlines():
        line = raw.strip()
        if not line:
            continue
        command, tokens = line[0], line[1:].split()
        if command == "p":
            if len(tokens) < 3:
                raise ValueError("malformed problem line")
            nodes = int(tokens[1])
            graph.add_nodes(nodes)
        elif command != "c":
            raise ValueError("Unknown line type")
    return nodes


def read_dimacs_binary(path: PathLike) -> Graph:
    """Read an undirected graph from a DIMACS binary file."""
    with open(path, "rb") as handle:
        data = handle.read()
    header = _HEADER.match(data)
    if header is None:
        raise ValueError("missing preamble size")
    newline = data.find(b"\n", header.end())
    if newline < 0:
        raise ValueError("missing preamble")
    start = newline + 1
    size = int(header.group(1))
    if start + size > len(data):
        raise ValueError("truncated preamble")
    graph = Graph(0, directed=False, weighted=False)
    nodes = _parse_preamble(data[start:start + size].decode("ascii"), graph)

    offset = start + size
    for u in range(nodes):
        row_length = (u >> 3) + 1
        row = data[offset:offset + row_length]
        if len(row) < row_length:
            raise ValueError("truncated adjacency data")
        offset += row_length
        for v in range(u + 1):
            if row[v >> 3] & (0x80 >> (v & 7)):
                graph.add_edge(u, v)
    return graph


def write_dimacs_binary(graph: Graph, path: PathLike) -> None:
    """Write ``graph`` to a file in DIMACS binary format."""
    preamble = f"p edge {graph.number_of_nodes()} {graph.number_of_edges()}\n"
    with open(path, "wb") as handle:
        handle.write(f"{len(preamble)}\n{preamble}".encode("ascii"))
        for v in graph.nodes():
            row = bytearray((v >> 3) + 1)
            for u in graph.neighbors(v):
                if u <= v:
                    row[u >> 3] |= 0x80 >> (u & 7)
            handle.write(bytes(row))
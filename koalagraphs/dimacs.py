"""Reading and writing graphs in the DIMACS text format."""

from __future__ import annotations

import os
from typing import Optional, Union

from koalagraphs.graph import Graph

PathLike = Union[str, "os.PathLike[str]"]

_UNSUPPORTED = {"min", "sp", "mat"}


def _create_graph(fmt: str) -> Graph:
    if fmt in _UNSUPPORTED:
        raise ValueError("Format not supported")
    if fmt == "max":
        return Graph(0, directed=True, weighted=True)
    return Graph(0, directed=False, weighted=False)


def _fields(tokens: list[str], count: int, number: int) -> list[str]:
    if len(tokens) < count:
        raise ValueError(f"line {number}: expected {count} fields")
    return tokens[:count]


def _read_edge(graph: Graph, fmt: str, tokens: list[str], number: int) -> None:
    if fmt in _UNSUPPORTED:
        raise ValueError("Format not supported")
    if fmt == "max":
        u, v, w = _fields(tokens, 3, number)
        graph.increase_weight(int(u) - 1, int(v) - 1, float(w))
        graph.increase_weight(int(v) - 1, int(u) - 1, 0.0)
    else:
        u, v = _fields(tokens, 2, number)
        graph.add_edge(int(u) - 1, int(v) - 1)


def read_dimacs_all(path: PathLike) -> tuple[Graph, Optional[int], Optional[int]]:
    """Read a DIMACS file; return the graph with its source and sink nodes (or None)."""
    graph = Graph()
    fmt: Optional[str] = None
    source: Optional[int] = None
    sink: Optional[int] = None
    with open(path, encoding="ascii") as handle:
        for number, raw in enumerate(handle, start=1):
            line = raw.strip()
            if not line:
                continue
            command, tokens = line[0], line[1:].split()
            if command == "c":
                continue
            if command == "p":
                fmt, nodes, _edges = _fields(tokens, 3, number)
                graph = _create_graph(fmt)
                graph.add_nodes(int(nodes))
            elif command in ("a", "e"):
                if fmt is None:
                    raise ValueError(f"line {number}: edge before problem line")
                if command == "e" and graph.directed:
                    graph = graph.to_undirected()
                _read_edge(graph, fmt, tokens, number)
            elif command == "n":
                node, label = _fields(tokens, 2, number)
                if label == "s":
                    source = int(node) - 1
                elif label == "t":
                    sink = int(node) - 1
                else:
                    raise ValueError("Unknown label")
            else:
                raise ValueError("Unknown line type")
    return graph, source, sink


def read_dimacs(path: PathLike) -> Graph:
    """Read a graph from a DIMACS file."""
    return read_dimacs_all(path)[0]


def write_dimacs(graph: Graph, path: PathLike) -> None:
    """Write ``graph`` to a DIMACS file as an edge problem."""
    edge_type = "a" if graph.directed else "e"
    with open(path, "w", encoding="ascii") as handle:
        handle.write(f"p edge {graph.number_of_nodes()} {graph.number_of_edges()}\n")
        for u, v in graph.edges():
            handle.write(f"{edge_type} {u + 1} {v + 1}\n")
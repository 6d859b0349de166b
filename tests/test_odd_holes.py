import pytest

from koalagraphs.graph import Graph, to_complement
from koalagraphs.odd_holes import (
    contains_hole,
    contains_odd_hole,
    contains_t1,
    contains_t2,
    contains_t3,
    is_path,
    is_t3,
)


def cycle(n):
    graph = Graph(n)
    for i in range(n):
        graph.add_edge(i, (i + 1) % n)
    return graph


def complete(n):
    graph = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(i, j)
    return graph


def path_graph(n):
    graph = Graph(n)
    for i in range(n - 1):
        graph.add_edge(i, i + 1)
    return graph


def test_is_path_accepts_induced_path():
    assert is_path(path_graph(4), [0, 1, 2, 3]) is True


def test_is_path_rejects_chord():
    assert is_path(cycle(4), [0, 1, 2, 3]) is False


def test_is_path_rejects_missing_edge():
    assert is_path(path_graph(4), [0, 2, 3]) is False


@pytest.mark.parametrize("n", [5, 7, 9])
def test_odd_cycles_contain_odd_hole(n):
    assert contains_odd_hole(cycle(n)) is True


@pytest.mark.parametrize("graph", [cycle(4), cycle(6), cycle(8), complete(5), path_graph(6)])
def test_graphs_without_odd_hole(graph):
    assert contains_odd_hole(graph) is False


def test_contains_hole_of_exact_length():
    assert contains_hole(cycle(6), 6) is True
    assert contains_hole(cycle(6), 5) is False


def test_contains_hole_short_length_is_false():
    assert contains_hole(cycle(5), 3) is False


def test_contains_t1():
    assert contains_t1(cycle(5)) is True
    assert contains_t1(cycle(6)) is False


@pytest.mark.parametrize("graph", [cycle(5), cycle(6), cycle(7), complete(5)])
def test_t1_implies_odd_hole(graph):
    if contains_t1(graph):
        assert contains_odd_hole(graph)
    else:
        assert not contains_hole(graph, 5)


@pytest.mark.parametrize("graph", [cycle(6), complete(5), path_graph(5)])
def test_no_t2_in_perfect_graphs(graph):
    assert contains_t2(graph) is False


@pytest.mark.parametrize("graph", [cycle(6), complete(5), to_complement(cycle(6))])
def test_no_t3_in_perfect_graphs(graph):
    assert contains_t3(graph) is False


def test_is_t3_rejects_wrong_vertex_count():
    graph = complete(6)
    assert is_t3(graph, [0, 1, 2, 3, 4], [4, 5], [0]) is False


def test_is_t3_rejects_empty_path():
    graph = complete(6)
    assert is_t3(graph, [0, 1, 2, 3, 4, 5], [], [0]) is False


def test_is_t3_rejects_repeated_vertices():
    graph = complete(6)
    assert is_t3(graph, [0, 1, 2, 3, 4, 4], [4, 5], [0]) is False
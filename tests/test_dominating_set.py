import itertools
import random

import pytest

from koalagraphs.dominating_set import BranchAndReduceMDS, dominating_set_size
from koalagraphs.graph import Graph
from koalagraphs.set_cover import (
    FominGrandoniKratschMSC,
    GrandoniMSC,
    RooijBodlaenderMSC,
)

SOLVERS = [GrandoniMSC, FominGrandoniKratschMSC, RooijBodlaenderMSC]


def graph_from_edges(n, edges):
    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def random_graph(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    edges = [(u, v) for u, v in itertools.combinations(range(n), 2) if rng.random() < 0.3]
    return graph_from_edges(n, edges)


def minimum_size(graph):
    mds = BranchAndReduceMDS(graph)
    n = graph.number_of_nodes()
    for size in range(n + 1):
        for chosen in itertools.combinations(range(n), size):
            selection = [i in chosen for i in range(n)]
            if mds.is_dominating(selection):
                return size
    raise AssertionError("no dominating set")


@pytest.mark.parametrize("solver", SOLVERS)
def test_path_on_three_nodes(solver):
    graph = graph_from_edges(3, [(0, 1), (1, 2)])
    assert BranchAndReduceMDS(graph, solver).run() == [False, True, False]


@pytest.mark.parametrize("solver", SOLVERS)
def test_star_uses_centre(solver):
    graph = graph_from_edges(5, [(0, leaf) for leaf in range(1, 5)])
    assert BranchAndReduceMDS(graph, solver).run() == [True, False, False, False, False]


@pytest.mark.parametrize("solver", SOLVERS)
def test_six_cycle(solver):
    graph = graph_from_edges(6, [(i, (i + 1) % 6) for i in range(6)])
    mds = BranchAndReduceMDS(graph, solver)
    result = mds.run()
    assert mds.is_dominating(result)
    assert dominating_set_size(result) == 2


@pytest.mark.parametrize("solver", SOLVERS)
@pytest.mark.parametrize("seed", range(30))
def test_random_graphs_are_minimum(solver, seed):
    graph = random_graph(seed)
    mds = BranchAndReduceMDS(graph, solver)
    result = mds.run()
    assert len(result) == graph.number_of_nodes()
    assert mds.is_dominating(result)
    assert dominating_set_size(result) == minimum_size(graph)


def test_isolated_nodes_are_all_chosen():
    graph = Graph(4)
    result = BranchAndReduceMDS(graph).run()
    assert result == [True] * 4


def test_result_is_stored():
    graph = graph_from_edges(3, [(0, 1), (1, 2)])
    mds = BranchAndReduceMDS(graph)
    result = mds.run()
    assert mds.dominating_set == result


def test_result_requires_run():
    mds = BranchAndReduceMDS(Graph(2))
    with pytest.raises(RuntimeError):
        _ = mds.dominating_set
    mds.run()
    assert mds.dominating_set == [True, True]


def test_is_dominating_rejects_empty_selection():
    graph = graph_from_edges(3, [(0, 1), (1, 2)])
    mds = BranchAndReduceMDS(graph)
    assert mds.is_dominating([False, False, False]) is False
    assert mds.is_dominating([True, False]) is False


def test_dominating_set_size_counts_chosen():
    selection = [True, False, True, True]
    assert dominating_set_size(selection) == selection.count(True)


def test_subgraph_with_sparse_identifiers():
    graph = graph_from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    sub = graph.subgraph([1, 2, 4])
    mds = BranchAndReduceMDS(sub)
    result = mds.run()
    assert mds.is_dominating(result)
    assert dominating_set_size(result) == minimum_size(sub)
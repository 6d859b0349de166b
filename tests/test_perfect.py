import pytest

from koalagraphs.graph import Graph, to_complement
from koalagraphs.perfect import PerfectGraphRecognition, State, contains_simple_prohibited


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


def petersen():
    graph = Graph(10)
    for i in range(5):
        graph.add_edge(i, (i + 1) % 5)
        graph.add_edge(i, i + 5)
        graph.add_edge(5 + i, 5 + (i + 2) % 5)
    return graph


def recognize(graph):
    recognition = PerfectGraphRecognition(graph)
    recognition.run()
    return recognition


def test_small_graph_is_perfect():
    recognition = recognize(complete(4))
    assert recognition.state is State.PERFECT
    assert recognition.is_perfect() is True


def test_five_cycle_has_t1():
    recognition = recognize(cycle(5))
    assert recognition.state is State.HAS_T1
    assert recognition.is_perfect() is False


@pytest.mark.parametrize("graph", [complete(5), cycle(6), to_complement(cycle(6))])
def test_perfect_graphs(graph):
    recognition = recognize(graph)
    assert recognition.is_perfect() is True
    assert recognition.check() is True


@pytest.mark.parametrize("graph", [cycle(7), to_complement(cycle(7)), petersen()])
def test_imperfect_graphs(graph):
    recognition = recognize(graph)
    assert recognition.is_perfect() is False
    assert recognition.state not in (State.PERFECT, State.UNKNOWN)
    assert recognition.check() is True


def test_run_returns_state():
    recognition = PerfectGraphRecognition(cycle(5))
    assert recognition.run() == recognition.state


def test_simple_prohibited():
    assert contains_simple_prohibited(cycle(5)) is State.HAS_T1
    assert contains_simple_prohibited(complete(5)) is State.UNKNOWN


def test_result_before_run_raises():
    recognition = PerfectGraphRecognition(cycle(5))
    with pytest.raises(RuntimeError):
        recognition.is_perfect()
    with pytest.raises(RuntimeError):
        recognition.check()
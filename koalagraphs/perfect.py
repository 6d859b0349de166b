"""Recognition of perfect graphs through the Berge graph recognition procedure."""

from __future__ import annotations

import enum

from koalagraphs.graph import Graph, to_complement
from koalagraphs.jewels import contains_jewel
from koalagraphs.near_cleaners import contains_near_cleaner_odd_hole
from koalagraphs.odd_holes import contains_odd_hole, contains_t1, contains_t2, contains_t3
from koalagraphs.pyramids import contains_pyramid


class State(enum.Enum):
    """Outcome of the recognition: perfect, or the structure that was found."""

    UNKNOWN = "unknown"
    PERFECT = "perfect"
    HAS_JEWEL = "has_jewel"
    HAS_PYRAMID = "has_pyramid"
    HAS_T1 = "has_t1"
    HAS_T2 = "has_t2"
    HAS_T3 = "has_t3"
    HAS_NEAR_CLEANER_ODD_HOLE = "has_near_cleaner_odd_hole"


_SIMPLE_CHECKS = (
    (contains_jewel, State.HAS_JEWEL),
    (contains_pyramid, State.HAS_PYRAMID),
    (contains_t1, State.HAS_T1),
    (contains_t2, State.HAS_T2),
    (contains_t3, State.HAS_T3),
)


def contains_simple_prohibited(graph: Graph) -> State:
    """Return the first simple prohibited structure found in ``graph``, or UNKNOWN."""
    for check, state in _SIMPLE_CHECKS:
        if check(graph):
            return state
    return State.UNKNOWN


class PerfectGraphRecognition:
    """Decides whether a graph is perfect, that is, Berge."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._state = State.UNKNOWN
        self._has_run = False

    def run(self) -> State:
        """Run the recognition and return the resulting state."""
        self._state = self._recognize()
        self._has_run = True
        return self._state

    def _recognize(self) -> State:
        graph = self.graph
        if graph.number_of_nodes() <= 4:
            return State.PERFECT
        state = contains_simple_prohibited(graph)
        if state is not State.UNKNOWN:
            return state
        complement = to_complement(graph)
        state = contains_simple_prohibited(complement)
        if state is not State.UNKNOWN:
            return state
        if contains_near_cleaner_odd_hole(graph) or contains_near_cleaner_odd_hole(complement):
            return State.HAS_NEAR_CLEANER_ODD_HOLE
        return State.PERFECT

    def _assure_finished(self) -> None:
        if not self._has_run:
            raise RuntimeError("run() has not been called")

    @property
    def state(self) -> State:
        self._assure_finished()
        return self._state

    def is_perfect(self) -> bool:
        """Tell whether the graph was recognised as perfect."""
        self._assure_finished()
        return self._state is State.PERFECT

    def check(self) -> bool:
        """Tell whether the result agrees with a direct search for odd holes and antiholes."""
        self._assure_finished()
        complement = to_complement(self.graph)
        berge = not contains_odd_hole(self.graph) and not contains_odd_hole(complement)
        return berge == self.is_perfect()
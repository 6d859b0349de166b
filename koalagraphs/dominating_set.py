"""Exact minimum dominating sets through minimum set cover."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from koalagraphs.graph import Graph
from koalagraphs.set_cover import BranchAndReduceMSC, RooijBodlaenderMSC


def dominating_set_size(selection: Sequence[bool]) -> int:
    """Return the number of nodes chosen in ``selection``."""
    return sum(1 for chosen in selection if chosen)


class BranchAndReduceMDS:
    """Minimum dominating set found by a branch and reduce set cover solver.

    The result is a list of booleans in the order of ``graph.nodes()``.
    """

    def __init__(
        self, graph: Graph, solver: type[BranchAndReduceMSC] = RooijBodlaenderMSC
    ) -> None:
        self.graph = graph
        self.solver = solver
        self._nodes = graph.nodes()
        index = {u: i for i, u in enumerate(self._nodes)}
        self._family = [
            {index[u]} | {index[v] for v in graph.neighbors(u)} for u in self._nodes
        ]
        self._result: Optional[list[bool]] = None

    def _occurrences(self) -> list[set[int]]:
        occurrences: list[set[int]] = [set() for _ in self._nodes]
        for holder, subset in enumerate(self._family):
            for element in subset:
                occurrences[element].add(holder)
        return occurrences

    def run(self) -> list[bool]:
        """Compute and return a minimum dominating set."""
        family = [set(subset) for subset in self._family]
        self._result = self.solver(family, self._occurrences()).run()
        return self._result

    @property
    def dominating_set(self) -> list[bool]:
        if self._result is None:
            raise RuntimeError("run() has not been called")
        return self._result

    def is_dominating(self, dominating_set: Sequence[bool]) -> bool:
        """Tell whether ``dominating_set`` dominates every node of the graph."""
        if len(dominating_set) != len(self._nodes):
            return False
        dominated: set[int] = set()
        for subset, chosen in zip(self._family, dominating_set):
            if chosen:
                dominated |= subset
        return len(dominated) == len(self._nodes)
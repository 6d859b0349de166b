"""Exact minimum set cover by branch and reduce.

A set cover instance is given twice: ``family[i]`` is the set of elements in
set ``i``, and ``occurrences[e]`` is the set of indices of the sets holding
element ``e``.  The solvers change both structures while they search, and
restore them before returning.  A solution is a list of booleans, one per set,
telling which sets are taken into the cover.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

SetFamily = list[set[int]]


def find_set_inclusion(sets: SetFamily) -> Optional[tuple[int, int]]:
    """Return indices ``(i, j)`` of a non-empty set ``sets[i]`` contained in ``sets[j]``, or None."""
    for i, candidate in enumerate(sets):
        if not candidate:
            continue
        for j, other in enumerate(sets):
            if i != j and len(candidate) <= len(other) and candidate <= other:
                return i, j
    return None


def exclude_set(index: int, excluded: set[int], reversed_sets: SetFamily) -> None:
    """Remove ``index`` from ``reversed_sets[e]`` for every element ``e`` of ``excluded``."""
    for element in excluded:
        reversed_sets[element].discard(index)


def include_set(index: int, included: set[int], reversed_sets: SetFamily) -> None:
    """Add ``index`` to ``reversed_sets[e]`` for every element ``e`` of ``included``."""
    for element in included:
        reversed_sets[element].add(index)


def _smaller_cover(first: list[bool], second: list[bool]) -> list[bool]:
    return first if sum(first) <= sum(second) else second


class BranchAndReduceMSC:
    """Branch and reduce solver using the unique element and subset rules."""

    use_edge_cover = False

    def __init__(self, family: SetFamily, occurrences: SetFamily) -> None:
        self.family = family
        self.occurrences = occurrences

    def run(self) -> list[bool]:
        """Return a minimum cover of all elements that occur in some set."""
        family = self.family
        if all(not subset for subset in family):
            return [False] * len(family)
        solution = self._reduce()
        if solution is not None:
            return solution
        if self.use_edge_cover and all(len(subset) <= 2 for subset in family):
            return self._edge_cover()
        largest = max(range(len(family)), key=lambda i: len(family[i]))
        included = self._forced_cover(largest)
        excluded = self._discarded_cover(largest)
        return _smaller_cover(included, excluded)

    def _reduce(self) -> Optional[list[bool]]:
        forced = self._unique_occurrence_set()
        if forced is not None:
            return self._forced_cover(forced)
        inclusion = find_set_inclusion(self.family)
        if inclusion is not None:
            return self._discarded_cover(inclusion[0])
        return None

    def _unique_occurrence_set(self) -> Optional[int]:
        for holders in self.occurrences:
            if len(holders) == 1:
                return next(iter(holders))
        return None

    def _discarded_cover(self, index: int) -> list[bool]:
        """Solve the instance with set ``index`` left out."""
        family, occurrences = self.family, self.occurrences
        discarded = family[index]
        exclude_set(index, discarded, occurrences)
        family[index] = set()
        try:
            return self.run()
        finally:
            family[index] = discarded
            include_set(index, discarded, occurrences)

    def _forced_cover(self, index: int) -> list[bool]:
        """Solve the instance with set ``index`` taken into the cover."""
        family, occurrences = self.family, self.occurrences
        elements = list(family[index])
        removed = [(holder, element) for element in elements for holder in occurrences[element]]
        for element in elements:
            occurrences[element].clear()
        for holder, element in removed:
            family[holder].discard(element)
        try:
            cover = self.run()
        finally:
            for holder, element in removed:
                family[holder].add(element)
                occurrences[element].add(holder)
        cover[index] = True
        return cover

    def _edge_cover(self) -> list[bool]:
        """Solve an instance of sets of size at most two through a maximum matching."""
        family, occurrences = self.family, self.occurrences
        helper = nx.Graph()
        helper.add_nodes_from(range(len(occurrences)))
        pairs = {}
        for index, subset in enumerate(family):
            if len(subset) == 2:
                pairs[index] = tuple(sorted(subset))
                helper.add_edge(*pairs[index])
        mate: dict[int, int] = {}
        for u, v in nx.max_weight_matching(helper, maxcardinality=True):
            mate[u], mate[v] = v, u
        cover = [False] * len(family)
        dominated = [False] * len(occurrences)
        for index, (u, v) in pairs.items():
            if mate.get(u) == v:
                cover[index] = True
                dominated[u] = dominated[v] = True
        for element, holders in enumerate(occurrences):
            if not dominated[element] and holders:
                cover[min(holders)] = True
        return cover


class GrandoniMSC(BranchAndReduceMSC):
    """Branch and reduce without the matching shortcut."""

    use_edge_cover = False


class FominGrandoniKratschMSC(BranchAndReduceMSC):
    """Branch and reduce solving instances of small sets by matching."""

    use_edge_cover = True


class RooijBodlaenderMSC(FominGrandoniKratschMSC):
    """Branch and reduce with subsumption, counting and size-two rules added."""

    def _reduce(self) -> Optional[list[bool]]:
        solution = super()._reduce()
        if solution is not None:
            return solution
        inclusion = find_set_inclusion(self.occurrences)
        if inclusion is not None:
            return self._subsumed_cover(inclusion[1])
        counting = self._counting_rule_set()
        if counting is not None:
            return self._forced_cover(counting)
        pair = self._two_cardinality_two_frequency_set()
        if pair is not None:
            return self._replaced_cover(pair)
        return None

    def _subsumed_cover(self, element: int) -> list[bool]:
        """Solve with ``element`` dropped, since covering another element covers it."""
        family, occurrences = self.family, self.occurrences
        holders = occurrences[element]
        exclude_set(element, holders, family)
        occurrences[element] = set()
        try:
            return self.run()
        finally:
            occurrences[element] = holders
            include_set(element, holders, family)

    def _counting_rule_set(self) -> Optional[int]:
        family, occurrences = self.family, self.occurrences
        for index, candidate in enumerate(family):
            frequency_two = 0
            uncovered: set[int] = set()
            for element in candidate:
                if len(occurrences[element]) != 2:
                    continue
                frequency_two += 1
                for holder in occurrences[element]:
                    if holder != index:
                        uncovered.update(family[holder] - candidate)
            if len(uncovered) < frequency_two:
                return index
        return None

    def _two_cardinality_two_frequency_set(self) -> Optional[int]:
        occurrences = self.occurrences
        for index, candidate in enumerate(self.family):
            if len(candidate) == 2 and all(len(occurrences[e]) == 2 for e in candidate):
                return index
        return None

    def _replaced_cover(self, index: int) -> list[bool]:
        """Replace set ``index`` and its two neighbours by the union of the neighbours."""
        family, occurrences = self.family, self.occurrences
        first, second = (
            holder
            for element in sorted(family[index])
            for holder in sorted(occurrences[element])
            if holder != index
        )
        indices = (index, first, second)
        originals = tuple(family[i] for i in indices)
        replacement = (family[first] | family[second]) - family[index]
        for i, subset in zip(indices, originals):
            exclude_set(i, subset, occurrences)
        include_set(first, replacement, occurrences)
        family[index], family[first], family[second] = set(), replacement, set()
        try:
            cover = self.run()
        finally:
            family[index], family[first], family[second] = originals
            exclude_set(first, replacement, occurrences)
            for i, subset in zip(indices, originals):
                include_set(i, subset, occurrences)
        if cover[first]:
            cover[second] = True
        else:
            cover[index] = True
        return cover
import itertools
import random

import pytest

from koalagraphs.set_cover import (
    BranchAndReduceMSC,
    FominGrandoniKratschMSC,
    GrandoniMSC,
    RooijBodlaenderMSC,
    exclude_set,
    find_set_inclusion,
    include_set,
)

SOLVER_NAMES = ["base", "grandoni", "fomin_grandoni_kratsch", "rooij_bodlaender"]


def run_solver(name, family, occurrences):
    if name == "base":
        return BranchAndReduceMSC(family, occurrences).run()
    if name == "grandoni":
        return GrandoniMSC(family, occurrences).run()
    if name == "fomin_grandoni_kratsch":
        return FominGrandoniKratschMSC(family, occurrences).run()
    if name == "rooij_bodlaender":
        return RooijBodlaenderMSC(family, occurrences).run()
    raise ValueError(name)


def occurrences_of(family, universe):
    occurrences = [set() for _ in range(universe)]
    for index, subset in enumerate(family):
        for element in subset:
            occurrences[element].add(index)
    return occurrences


def random_instance(seed):
    rng = random.Random(seed)
    universe = rng.randint(3, 9)
    family = [
        {e for e in range(universe) if rng.random() < 0.35}
        for _ in range(rng.randint(2, 8))
    ]
    covered = set().union(*family)
    missing = set(range(universe)) - covered
    if missing:
        family.append(missing)
    return family, universe


def neighbourhood_instance(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 9)
    family = [{u} for u in range(n)]
    for u, v in itertools.combinations(range(n), 2):
        if rng.random() < 0.3:
            family[u].add(v)
            family[v].add(u)
    return family, n


def minimum_cover_size(family, universe):
    target = set(range(universe))
    for size in range(len(family) + 1):
        for chosen in itertools.combinations(family, size):
            if set().union(set(), *chosen) >= target:
                return size
    raise AssertionError("instance has no cover")


def is_cover(family, universe, cover):
    chosen = [subset for subset, taken in zip(family, cover) if taken]
    return set().union(set(), *chosen) >= set(range(universe))


def test_find_set_inclusion_finds_pair():
    assert find_set_inclusion([{1}, {1, 2}]) == (0, 1)


def test_find_set_inclusion_skips_empty_sets():
    assert find_set_inclusion([set(), {1}, {2}]) is None


def test_find_set_inclusion_identical_sets():
    result = find_set_inclusion([{3, 4}, {4, 3}])
    assert result == (0, 1)


def test_exclude_and_include_round_trip():
    family = [{0, 1}, {1, 2}]
    occurrences = occurrences_of(family, 3)
    before = [set(s) for s in occurrences]
    exclude_set(1, family[1], occurrences)
    assert all(1 not in holders for holders in occurrences)
    include_set(1, family[1], occurrences)
    assert occurrences == before


@pytest.mark.parametrize("name", SOLVER_NAMES)
def test_single_superset_is_chosen(name):
    family = [{0, 1}, {1, 2}, {0, 1, 2}]
    cover = run_solver(name, family, occurrences_of(family, 3))
    assert cover == [False, False, True]


@pytest.mark.parametrize("name", SOLVER_NAMES)
def test_empty_instance(name):
    family = [set(), set()]
    assert run_solver(name, family, [set(), set()]) == [False, False]


@pytest.mark.parametrize("name", SOLVER_NAMES)
@pytest.mark.parametrize("seed", range(25))
def test_random_instances_are_minimum_covers(name, seed):
    family, universe = random_instance(seed)
    occurrences = occurrences_of(family, universe)
    cover = run_solver(name, family, occurrences)
    assert len(cover) == len(family)
    assert is_cover(family, universe, cover)
    assert sum(cover) == minimum_cover_size(family, universe)


@pytest.mark.parametrize("name", SOLVER_NAMES)
@pytest.mark.parametrize("seed", range(25))
def test_neighbourhood_instances_are_minimum_covers(name, seed):
    family, universe = neighbourhood_instance(seed)
    occurrences = occurrences_of(family, universe)
    cover = run_solver(name, family, occurrences)
    assert is_cover(family, universe, cover)
    assert sum(cover) == minimum_cover_size(family, universe)


@pytest.mark.parametrize("name", SOLVER_NAMES)
@pytest.mark.parametrize("seed", range(10))
def test_run_restores_instance(name, seed):
    family, universe = neighbourhood_instance(seed)
    occurrences = occurrences_of(family, universe)
    family_before = [set(s) for s in family]
    occurrences_before = [set(s) for s in occurrences]
    cover = run_solver(name, family, occurrences)
    assert len(cover) == len(family_before)
    assert family == family_before
    assert occurrences == occurrences_before


def test_pairs_instance_uses_matching():
    family = [{0, 1}, {1, 2}, {2, 3}, {3, 0}]
    occurrences = occurrences_of(family, 4)
    cover = FominGrandoniKratschMSC(family, occurrences).run()
    assert is_cover(family, 4, cover)
    assert sum(cover) == minimum_cover_size(family, 4)
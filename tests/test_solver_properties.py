"""
Cross-solver properties checked on seeded random instances.

Costs and defenses are whole numbers so every float sum is exact.
"""
import itertools
import random
from typing import List

import pytest

from src.business_objects.items import ArmorItem
from src.planning.armor_vector import sum_armor_vector
from src.planning.solvers.exhaustive import exhaustive_max_defense
from src.planning.solvers.greedy import greedy_max_defense

SEEDS = range(25)


def _random_instance(seed: int):
    rng = random.Random(seed)
    n = rng.randint(0, 10)
    armors: List[ArmorItem] = [
        ArmorItem(f"armor{i}", cost=float(rng.randint(1, 40)), defense=float(rng.randint(0, 100)))
        for i in range(n)
    ]
    budget = float(rng.randint(0, 120))
    return armors, budget


def _best_feasible_defense(armors, budget) -> float:
    best = 0.0
    for r in range(len(armors) + 1):
        for combo in itertools.combinations(armors, r):
            cost, defense = sum_armor_vector(combo)
            if cost <= budget:
                best = max(best, defense)
    return best


@pytest.mark.parametrize("seed", SEEDS)
def test_both_solvers_feasible(seed):
    armors, budget = _random_instance(seed)
    for solver in (greedy_max_defense, exhaustive_max_defense):
        assert sum_armor_vector(solver(armors, budget)).cost <= budget


@pytest.mark.parametrize("seed", SEEDS)
def test_exhaustive_is_global_optimum(seed):
    armors, budget = _random_instance(seed)
    found = sum_armor_vector(exhaustive_max_defense(armors, budget)).defense
    assert found == _best_feasible_defense(armors, budget)


@pytest.mark.parametrize("seed", SEEDS)
def test_exhaustive_dominates_greedy(seed):
    armors, budget = _random_instance(seed)
    exact = sum_armor_vector(exhaustive_max_defense(armors, budget)).defense
    heuristic = sum_armor_vector(greedy_max_defense(armors, budget)).defense
    assert exact >= heuristic


@pytest.mark.parametrize("seed", SEEDS)
def test_solvers_are_idempotent(seed):
    armors, budget = _random_instance(seed)
    assert greedy_max_defense(armors, budget) == greedy_max_defense(armors, budget)
    assert exhaustive_max_defense(armors, budget) == exhaustive_max_defense(armors, budget)


@pytest.mark.parametrize("seed", SEEDS)
def test_solutions_only_use_input_items(seed):
    armors, budget = _random_instance(seed)
    ids = {id(a) for a in armors}
    for solver in (greedy_max_defense, exhaustive_max_defense):
        assert all(id(a) in ids for a in solver(armors, budget))

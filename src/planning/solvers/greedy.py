# -*- coding: utf-8 -*-
"""
Greedy max-defense solver.

Repeatedly buys the most gold-efficient armor (defense / cost) that still fits
the remaining budget, until nothing else fits or the pool is empty.

This is a heuristic: it is fast (O(n^2)) but can miss the best subset, e.g.
a cheap efficient armor may crowd out a pair that adds up to more defense.
Use the exhaustive solver on small inputs when the exact optimum matters.
"""

from __future__ import annotations
import logging
from typing import Sequence

from src.business_objects.items import ArmorItem
from src.heuristics.pick_next import choose_best_armor
from src.planning.armor_vector import ArmorVector

logger = logging.getLogger(__name__)


def greedy_max_defense(
    armors: Sequence[ArmorItem],
    total_cost: float,
) -> ArmorVector:
    """
    Select armors greedily by efficiency within a `total_cost` gold budget.

    The input is never mutated; the returned list is new and its order is the
    order in which armors were picked. An empty input or a non-positive budget
    gives an empty list.
    """
    result: ArmorVector = []
    todo: ArmorVector = list(armors)
    spent = 0.0

    while todo:
        idx = choose_best_armor(todo, spent, total_cost)
        if idx is None:
            break
        chosen = todo.pop(idx)
        result.append(chosen)
        spent += chosen.cost

    logger.debug(
        "greedy: picked %d of %d armors, cost %.3f / budget %.3f",
        len(result), len(armors), spent, total_cost,
    )
    return result

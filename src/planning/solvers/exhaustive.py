# -*- coding: utf-8 -*-
"""
Exhaustive max-defense solver.

Enumerates every subset of the input with a bit mask: for mask in [0, 2^n),
bit j set means armor j is in the candidate. The feasible candidate with the
greatest total defense wins; the empty subset (mask 0) is the starting best, so
a result always exists. On equal defense the lowest mask is kept, which makes
the output reproducible.

Runtime is O(2^n * n). Filter the input down first (see
planning.armor_vector.filter_armor_vector); anything past ~25 items is
impractical. The hard limit is 63 items, the width of an unsigned 64-bit mask.
"""

from __future__ import annotations
import logging
from typing import Sequence

from src.business_objects.errors import SearchSpaceError
from src.business_objects.items import ArmorItem
from src.planning.armor_vector import ArmorVector, sum_armor_vector

logger = logging.getLogger(__name__)

MAX_EXHAUSTIVE_ITEMS = 63


def exhaustive_max_defense(
    armors: Sequence[ArmorItem],
    total_cost: float,
) -> ArmorVector:
    """
    Return the subset of `armors` with maximum total defense whose total cost
    is <= `total_cost`.

    Raises
    ------
    SearchSpaceError
        If more than MAX_EXHAUSTIVE_ITEMS armors are given. Nothing is
        enumerated in that case.
    """
    n = len(armors)
    if n > MAX_EXHAUSTIVE_ITEMS:
        raise SearchSpaceError(
            f"Exhaustive search supports at most {MAX_EXHAUSTIVE_ITEMS} armors, got {n}."
        )

    best: ArmorVector = []
    best_defense = 0.0

    for bits in range(1, 1 << n):
        candidate: ArmorVector = [armors[j] for j in range(n) if (bits >> j) & 1]
        cost, defense = sum_armor_vector(candidate)
        if cost <= total_cost and defense > best_defense:
            best = candidate
            best_defense = defense

    logger.debug(
        "exhaustive: searched %d subsets of %d armors, best defense %.3f",
        1 << n, n, best_defense,
    )
    return best

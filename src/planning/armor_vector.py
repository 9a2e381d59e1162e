# -*- coding: utf-8 -*-
"""
Armor vector helpers shared by both solvers and the reporting layer.

An ArmorVector is a plain ordered list of ArmorItem references. Items are
frozen, so the same object may sit in the source list, a filtered list and a
solution at once. Nothing here mutates its input.
"""

from __future__ import annotations
from typing import Iterable, List, NamedTuple

from src.business_objects.items import ArmorItem

ArmorVector = List[ArmorItem]


class ArmorTotals(NamedTuple):
    cost: float
    defense: float


def sum_armor_vector(armors: Iterable[ArmorItem]) -> ArmorTotals:
    """Total gold cost and defense of a vector. Empty input gives (0.0, 0.0)."""
    total_cost = 0.0
    total_defense = 0.0
    for armor in armors:
        total_cost += armor.cost
        total_defense += armor.defense
    return ArmorTotals(cost=total_cost, defense=total_defense)


def filter_armor_vector(
    source: Iterable[ArmorItem],
    min_defense: float,
    max_defense: float,
    total_size: int,
) -> ArmorVector:
    """
    Return the first `total_size` items of `source` whose defense lies in
    [min_defense, max_defense] (inclusive), in source order.

    Used to drop armor that cannot help (zero defense) and to keep the
    exhaustive search input small. This is a truncation, not a best-N pick:
    once the cap is reached the rest of `source` is not looked at.
    """
    filtered: ArmorVector = []
    if total_size <= 0:
        return filtered

    for armor in source:
        if min_defense <= armor.defense <= max_defense:
            filtered.append(armor)
            if len(filtered) >= total_size:
                break
    return filtered

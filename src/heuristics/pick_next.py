# -*- coding: utf-8 -*-
"""
Single greedy step: which armor to buy next.

Public entry point:
    choose_best_armor(pool, spent, budget)
returns the pool index of the chosen armor (no mutation) or None if nothing fits.

Rule: among armors with spent + cost <= budget, take the greatest efficiency
(defense / cost). Comparison is strict '>', so on equal efficiency the armor
seen first (lowest index) wins.
"""

from __future__ import annotations
from typing import Optional, Sequence

from src.business_objects.items import ArmorItem
from .features import efficiency


def _can_afford(armor: ArmorItem, spent: float, budget: float) -> bool:
    # exact-equal residual is affordable
    return spent + armor.cost <= budget


def choose_best_armor(
    pool: Sequence[ArmorItem],
    spent: float,
    budget: float,
) -> Optional[int]:
    """
    Decide which armor in `pool` is best to buy *right now*.

    Parameters
    ----------
    pool : Sequence[ArmorItem]
        Candidates still available (order is used for tie-breaking).
    spent : float
        Gold already committed.
    budget : float
        Total gold available.

    Returns
    -------
    Optional[int]
        Index into `pool` of the chosen armor, or None if no armor fits.
    """
    best_index: Optional[int] = None
    best_eff = 0.0
    for i, armor in enumerate(pool):
        if not _can_afford(armor, spent, budget):
            continue
        eff = efficiency(armor)
        # starts from "no best": a lone affordable zero-defense armor is still chosen
        if best_index is None or eff > best_eff:
            best_index = i
            best_eff = eff
    return best_index

# -*- coding: utf-8 -*-
"""
Console rendering of armor vectors.
"""

from __future__ import annotations
from typing import Iterable, List

from src.business_objects.items import ArmorItem
from src.planning.armor_vector import sum_armor_vector


def format_armor_vector(armors: Iterable[ArmorItem]) -> List[str]:
    """
    Lines describing each armor followed by the grand totals.
    An empty vector renders as a single "[empty armor list]" line after the title.
    """
    armors = list(armors)
    lines = ["*** Armor Vector ***"]
    if not armors:
        lines.append("[empty armor list]")
        return lines

    for armor in armors:
        lines.append(
            f"Ye olde {armor.description} ==> "
            f"Cost of {armor.cost:g} gold; Defense points = {armor.defense:g}"
        )
    totals = sum_armor_vector(armors)
    lines.append(f"> Grand total cost: {totals.cost:g} gold")
    lines.append(f"> Grand total defense: {totals.defense:g}")
    return lines


def print_armor_vector(armors: Iterable[ArmorItem]) -> None:
    for line in format_armor_vector(armors):
        print(line)

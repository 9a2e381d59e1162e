# -*- coding: utf-8 -*-
"""
Derived armor features used by the greedy heuristic and the CSV reports.

Pure/stateless; no mutation or I/O.
"""

from __future__ import annotations
from typing import Dict

from src.business_objects.items import ArmorItem


def efficiency(armor: ArmorItem) -> float:
    """Defense points bought per gold (cost is validated > 0)."""
    return float(armor.defense) / float(armor.cost)


def compute_armor_features(armor: ArmorItem) -> Dict[str, float]:
    """
    Features:
      - cost:       gold price
      - defense:    defense points
      - efficiency: defense / cost
    """
    return {
        "cost": float(armor.cost),
        "defense": float(armor.defense),
        "efficiency": efficiency(armor),
    }


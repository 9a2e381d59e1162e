# -*- coding: utf-8 -*-
"""
Solution model for armor selection results.

Built by the run orchestrator around the plain ArmorVector a solver returns,
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from src.business_objects.items import ArmorItem


@dataclass(frozen=True)
class Solution:
    """
    Outcome of one solver run.

    Attributes
    ----------
    solver : str
        Name of the solver that produced it ("greedy", "exhaustive").
    armors : tuple[ArmorItem, ...]
        Selected armors, in the order the solver returned them.
    total_cost : float
        Sum of selected costs (always <= budget).
    total_defense : float
        Sum of selected defense points.
    budget : float
        Gold budget the solver was given.
    elapsed_seconds : float
        Wall time spent inside the solver.
    """
    solver: str
    armors: Tuple[ArmorItem, ...]
    total_cost: float
    total_defense: float
    budget: float
    elapsed_seconds: float = 0.0

# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for an armor selection run.

Filtering (applied before any solver):
  - min_defense / max_defense: inclusive defense window
  - max_items: keep only the first N matching armors (exhaustive search is
    exponential in this number)

Solving:
  - budget: gold available
  - solver: "greedy" | "exhaustive"
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    budget : float
        Total gold that may be spent.
    min_defense : float
        Lowest defense an armor may have to be considered.
    max_defense : float
        Highest defense an armor may have to be considered.
    max_items : int
        Cap on the number of armors passed to the solver.
    solver : str
        "greedy" or "exhaustive".
    """
    budget: float = 500.0
    min_defense: float = 1.0
    max_defense: float = 2500.0
    max_items: int = 16
    solver: str = "greedy"

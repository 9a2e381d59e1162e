# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for armor selection runs.
- No side effects
- Works off planning.Solution only

Public API:
  - compute_solution_metrics(solution) -> Dict[str, float]
  - optimality_gap(heuristic, exact) -> float
"""

from __future__ import annotations
from typing import Dict

from src.planning import Solution


def compute_solution_metrics(solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Cost": ...,
        "Total Defense": ...,
        "Budget": ...,
        "Budget Utilization": ...,   # percent (0..100)
        "Defense Per Gold": ...,
        "Items Selected": ...,
        "Elapsed Seconds": ...
      }
    """
    cost = float(solution.total_cost)
    defense = float(solution.total_defense)
    budget = float(solution.budget)

    utilization = 0.0 if budget <= 0.0 else (cost / budget) * 100.0
    dpg = 0.0 if cost == 0.0 else defense / cost

    return {
        "Total Cost": cost,
        "Total Defense": defense,
        "Budget": budget,
        "Budget Utilization": float(utilization),
        "Defense Per Gold": float(dpg),
        "Items Selected": float(len(solution.armors)),
        "Elapsed Seconds": float(solution.elapsed_seconds),
    }


def optimality_gap(heuristic: Solution, exact: Solution) -> float:
    """
    Percent of the exact optimum's defense that the heuristic leaves on the table.
    0.0 when the optimum itself is 0 (nothing to lose).
    """
    best = float(exact.total_defense)
    if best == 0.0:
        return 0.0
    return (best - float(heuristic.total_defense)) / best * 100.0

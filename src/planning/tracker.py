# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for armor selection runs.

Files produced (when Tracker is used):
  - <solver>_selection.csv  (chosen armors in pick order)
  - run_summary.csv         (one KPI row per solver)
  - timing.csv              (timing sweep rows)

Callers decide when to invoke these writers; the run orchestrator and the
scripts call them after solving.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.heuristics.features import compute_armor_features
from src.planning import Solution
from src.quality_metrics.core import compute_solution_metrics, optimality_gap


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_selection_csv(
        self,
        solution: Solution,
        filename: Optional[str] = None,
    ) -> str:
        """
        Persist the armors a solver picked.

        Columns:
          order_index, description, cost, defense, efficiency
        """
        path = os.path.join(self.out_dir, filename or f"{solution.solver}_selection.csv")

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "description", "cost", "defense", "efficiency"])
            for idx, armor in enumerate(solution.armors):
                feats = compute_armor_features(armor)
                w.writerow([
                    idx,
                    armor.description,
                    _fmt(feats["cost"]),
                    _fmt(feats["defense"]),
                    _fmt(feats["efficiency"]),
                ])
        return path

    def write_run_summary_csv(
        self,
        solutions: List[Solution],
        filename: str = "run_summary.csv",
    ) -> str:
        """
        One KPI row per solution.

        Columns:
          solver, Total Cost, Total Defense, Budget, Budget Utilization,
          Defense Per Gold, Items Selected, Elapsed Seconds, Gap To Best

        'Gap To Best' is measured against the highest-defense solution in
        `solutions` (the exhaustive one when both solvers ran).
        """
        path = os.path.join(self.out_dir, filename)
        best = max(solutions, key=lambda s: s.total_defense) if solutions else None

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "solver",
                "Total Cost",
                "Total Defense",
                "Budget",
                "Budget Utilization",
                "Defense Per Gold",
                "Items Selected",
                "Elapsed Seconds",
                "Gap To Best",
            ])
            for sol in solutions:
                m = compute_solution_metrics(sol)
                w.writerow([
                    sol.solver,
                    _fmt(m["Total Cost"]),
                    _fmt(m["Total Defense"]),
                    _fmt(m["Budget"]),
                    _fmt(m["Budget Utilization"]),
                    _fmt(m["Defense Per Gold"]),
                    int(m["Items Selected"]),
                    f'{m["Elapsed Seconds"]:.6f}',
                    _fmt(optimality_gap(sol, best)) if best is not None else "",
                ])
        return path

    def write_timing_csv(
        self,
        rows: List[Dict[str, Any]],
        filename: str = "timing.csv",
    ) -> str:
        """
        Timing sweep rows.

        Columns:
          solver, n, budget, elapsed_seconds, total_defense
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["solver", "n", "budget", "elapsed_seconds", "total_defense"])
            for row in rows:
                w.writerow([
                    row["solver"],
                    int(row["n"]),
                    _fmt(row["budget"]),
                    f'{float(row["elapsed_seconds"]):.6f}',
                    _fmt(row["total_defense"]),
                ])
        return path


def _fmt(x: float) -> str:
    return f"{float(x):.3f}"

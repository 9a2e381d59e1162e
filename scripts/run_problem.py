#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run both solvers on the armor database and compare them.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - greedy_selection.csv      (armors picked by the greedy heuristic)
  - exhaustive_selection.csv  (exact optimum)
  - run_summary.csv           (KPIs per solver incl. gap to best)
"""

from __future__ import annotations
import os
from typing import List

# ====== CONFIGURATION ======
ARMOR_PATH = "armor.csv"
OUT_DIR = "reports/armor"

BUDGET = 500.0

# Defense window and cap applied before solving (exhaustive is 2^MAX_ITEMS)
MIN_DEFENSE = 1.0
MAX_DEFENSE = 2500.0
MAX_ITEMS = 16

DEBUG = False
# ===========================

from src.business_objects.items import ArmorItem
from src.planning import Policy
from src.planning.run_orchestrator import run_comparison
from src.planning.tracker import Tracker
from src.quality_metrics.core import optimality_gap
from src.utils.logging_setup import setup_logging
from src.utils.read_armor import load_armor_database
from src.utils.report import print_armor_vector


def main() -> None:
    setup_logging(debug=DEBUG)

    armors: List[ArmorItem] = load_armor_database(ARMOR_PATH)

    policy = Policy(
        budget=BUDGET,
        min_defense=MIN_DEFENSE,
        max_defense=MAX_DEFENSE,
        max_items=MAX_ITEMS,
    )
    tracker = Tracker(out_dir=OUT_DIR)

    solutions = run_comparison(armors, policy, tracker=tracker)

    for name, sol in solutions.items():
        print(f"\n=== {name} (budget {BUDGET:g} gold, {sol.elapsed_seconds:.6f}s) ===")
        print_armor_vector(sol.armors)

    gap = optimality_gap(solutions["greedy"], solutions["exhaustive"])
    print(f"\nGreedy optimality gap: {gap:.2f}%")
    print(f"Artifacts written under: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Timing sweep: how solver run time grows with input size.

For n = 1..MAX_N, both solvers run on the first n filtered armors with the
same budget; each run's wall time lands in OUT_DIR/timing.csv.

    python scripts/run_timing.py
"""

from __future__ import annotations
import os
from typing import Any, Dict, List

# ====== CONFIGURATION ======
ARMOR_PATH = "armor.csv"
OUT_DIR = "reports/timing"

BUDGET = 500.0
MIN_DEFENSE = 1.0
MAX_DEFENSE = 2500.0
MAX_N = 20
# ===========================

from src.planning.armor_vector import filter_armor_vector
from src.planning.run_orchestrator import SOLVERS, solve_filtered
from src.planning.tracker import Tracker
from src.utils.logging_setup import setup_logging
from src.utils.read_armor import load_armor_database


def main() -> None:
    setup_logging()

    armors = load_armor_database(ARMOR_PATH)
    pool = filter_armor_vector(armors, MIN_DEFENSE, MAX_DEFENSE, MAX_N)

    rows: List[Dict[str, Any]] = []
    for n in range(1, len(pool) + 1):
        for name in SOLVERS:
            sol = solve_filtered(pool[:n], BUDGET, name)
            rows.append({
                "solver": name,
                "n": n,
                "budget": BUDGET,
                "elapsed_seconds": sol.elapsed_seconds,
                "total_defense": sol.total_defense,
            })

    path = Tracker(out_dir=OUT_DIR).write_timing_csv(rows)
    print(f"Timing rows: {len(rows)}")
    print(f"Written to: {os.path.abspath(path)}")


if __name__ == "__main__":
    main()

# -*- coding: utf-8 -*-
"""
Run orchestrator: filter -> solve (timed) -> Solution.

Thin wrapper that connects Policy -> armor filter -> solver, and (optionally)
writes CSV artifacts via planning.Tracker.

- Reads the defense window and item cap from Policy
- Times the solver call only (filtering is not measured)
- Aggregates the solver output into a frozen Solution
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Sequence

from src.business_objects.items import ArmorItem
from src.planning.armor_vector import ArmorVector, filter_armor_vector, sum_armor_vector
from src.planning.policy import Policy
from src.planning.solution import Solution
from src.planning.solvers.exhaustive import exhaustive_max_defense
from src.planning.solvers.greedy import greedy_max_defense
from src.planning.tracker import Tracker
from src.utils.timer import Timer

logger = logging.getLogger(__name__)

SolverFn = Callable[[Sequence[ArmorItem], float], ArmorVector]

SOLVERS: Dict[str, SolverFn] = {
    "greedy": greedy_max_defense,
    "exhaustive": exhaustive_max_defense,
}


def _solver_for(name: str) -> SolverFn:
    try:
        return SOLVERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown solver: {name}. Expected one of: {', '.join(sorted(SOLVERS))}."
        ) from None


def _filtered(armors: Sequence[ArmorItem], policy: Policy) -> ArmorVector:
    return filter_armor_vector(armors, policy.min_defense, policy.max_defense, policy.max_items)


def solve_filtered(
    filtered: Sequence[ArmorItem],
    budget: float,
    solver: str,
) -> Solution:
    """
    Time `solver` on an already-filtered vector and wrap the result.

    Raises ValueError for an unknown solver name; SearchSpaceError from the
    exhaustive solver propagates unchanged.
    """
    fn = _solver_for(solver)
    with Timer() as timer:
        chosen = fn(filtered, budget)
    totals = sum_armor_vector(chosen)

    logger.info(
        "%s: %d/%d armors, cost %.3f of %.3f gold, defense %.3f (%.6fs)",
        solver, len(chosen), len(filtered), totals.cost, budget, totals.defense, timer.elapsed(),
    )
    return Solution(
        solver=solver,
        armors=tuple(chosen),
        total_cost=totals.cost,
        total_defense=totals.defense,
        budget=budget,
        elapsed_seconds=timer.elapsed(),
    )


def run_solver(
    armors: Sequence[ArmorItem],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Filter `armors` with the policy window and run `policy.solver` on the result.

    Parameters
    ----------
    armors : Sequence[ArmorItem]
        Full armor list (not mutated).
    policy : Policy
        Budget, defense window, item cap and solver name.
    tracker : Tracker | None
        If provided, writes <solver>_selection.csv into tracker.out_dir.

    Returns
    -------
    Solution
    """
    solution = solve_filtered(_filtered(armors, policy), policy.budget, policy.solver)
    if tracker is not None:
        tracker.write_selection_csv(solution)
    return solution


def run_comparison(
    armors: Sequence[ArmorItem],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> Dict[str, Solution]:
    """
    Run every registered solver on the same filtered input.
    `policy.solver` is ignored here.

    Returns {solver_name: Solution}, greedy first.
    """
    filtered = _filtered(armors, policy)
    solutions: Dict[str, Solution] = {}
    for name in SOLVERS:
        solutions[name] = solve_filtered(filtered, policy.budget, name)

    if tracker is not None:
        for sol in solutions.values():
            tracker.write_selection_csv(sol)
        tracker.write_run_summary_csv(list(solutions.values()))
    return solutions

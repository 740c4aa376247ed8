# -*- coding: utf-8 -*-
"""
Two-stage MKP solver: greedy construction followed by 1-swap local search.

Pipeline:
  1) state = selection.to_runtime()        (all items unassigned)
  2) run_greedy(...)                        → greedy Solution snapshot
  3) run_local_search(...)                  → final Solution snapshot
  4) Optional artifacts via Tracker (assignments, per_knapsack, problem_summary)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

from mkp.planning.policy import Policy
from mkp.planning.solution import PlacementDecision, Solution, SwapMove
from mkp.planning.state import AssignmentState, SelectionState
from mkp.planning.solvers.greedy import run_greedy
from mkp.planning.solvers.local_search import run_local_search
from mkp.planning.tracker import Tracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoStageResult:
    """
    Everything a driver needs to report a run.

    Attributes
    ----------
    greedy : Solution
        Snapshot right after construction.
    final : Solution
        Snapshot at the local optimum.
    decisions : list[PlacementDecision]
        Greedy decisions in processing order.
    swaps : list[SwapMove]
        Accepted swaps in order.
    state : AssignmentState
        The final mutable state (for further inspection).
    """
    greedy: Solution
    final: Solution
    decisions: List[PlacementDecision]
    swaps: List[SwapMove]
    state: AssignmentState


def run_two_stage(
    selection: SelectionState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> TwoStageResult:
    """Construct greedily, then refine to a 1-swap local optimum."""
    if policy is None:
        policy = Policy()

    state = selection.to_runtime(eps=policy.eps)

    decisions = run_greedy(selection.items, state, policy, tracker=tracker)
    greedy_solution = state.to_solution()
    logger.info("Initial solution value (greedy): %.6g", greedy_solution.total_value)

    swaps = run_local_search(state, verify=policy.verify_swaps, tracker=tracker)
    final_solution = state.to_solution()
    logger.info(
        "Improved solution value: %.6g (%d swap(s))", final_solution.total_value, len(swaps)
    )

    if tracker is not None:
        tracker.write_assignments_csv(selection, final_solution)
        tracker.write_per_knapsack_csv(selection, final_solution)
        tracker.write_problem_summary_csv(selection, final_solution, greedy_value=greedy_solution.total_value)

    return TwoStageResult(
        greedy=greedy_solution,
        final=final_solution,
        decisions=decisions,
        swaps=swaps,
        state=state,
    )

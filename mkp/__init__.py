# -*- coding: utf-8 -*-
"""
Greedy construction + 1-swap local search for the Multiple Knapsack Problem.

Typical use:

    from mkp import SelectionState, build_catalog, build_knapsacks, run_two_stage

    selection = SelectionState(
        items=build_catalog([(0, 35, 10), (1, 50, 12)]),
        knapsacks=build_knapsacks([20, 20]),
    )
    result = run_two_stage(selection)
    result.final.total_value
"""

from mkp.business_objects import (
    Item,
    KnapsackSpec,
    SchemaError,
    StateValidationError,
    build_catalog,
    build_knapsacks,
)
from mkp.planning import (
    UNASSIGNED,
    AssignmentState,
    PlacementDecision,
    Policy,
    SelectionState,
    Solution,
    SwapMove,
)
from mkp.planning.solvers.greedy import run_greedy
from mkp.planning.solvers.local_search import improve_solution, run_local_search
from mkp.planning.solvers.two_stage import TwoStageResult, run_two_stage

__version__ = "0.1.0"

__all__ = [
    "Item",
    "KnapsackSpec",
    "SchemaError",
    "StateValidationError",
    "build_catalog",
    "build_knapsacks",
    "UNASSIGNED",
    "AssignmentState",
    "PlacementDecision",
    "Policy",
    "SelectionState",
    "Solution",
    "SwapMove",
    "run_greedy",
    "improve_solution",
    "run_local_search",
    "TwoStageResult",
    "run_two_stage",
]

# -*- coding: utf-8 -*-
"""
Knapsack ranking strategies for greedy construction ("place next").

Public entry point:
    choose_knapsack(state, item_id, strategy="first_fit")
returns a knapsack index (no mutation) or None if the item fits nowhere.

Supported strategies (all deterministic; ties go to the lower knapsack index):
  1) first_fit      -> lowest k with w_j <= r_k
  2) best_fit       -> argmin_k (r_k - w_j)
  3) max_remaining  -> argmax_k r_k
"""

from __future__ import annotations
from typing import List, Optional

from mkp.planning.state import AssignmentState


# -----------------------------
# Individual strategies (pure)
# -----------------------------

def _first_fit(state: AssignmentState, item_id: int) -> Optional[int]:
    for k in range(state.num_knapsacks):
        if state.can_assign(item_id, k):
            return k
    return None


def _best_fit(state: AssignmentState, item_id: int, feas: List[int]) -> Optional[int]:
    weight = state.items[item_id].weight
    best: Optional[int] = None
    best_res = 0.0
    for k in feas:
        res = state.residual[k] - weight
        if best is None or res < best_res:
            best, best_res = k, res
    return best


def _max_remaining(state: AssignmentState, feas: List[int]) -> Optional[int]:
    best: Optional[int] = None
    for k in feas:
        if best is None or state.residual[k] > state.residual[best]:
            best = k
    return best


# -----------------------------
# Strategy dispatcher
# -----------------------------

def choose_knapsack(
    state: AssignmentState,
    item_id: int,
    strategy: str = "first_fit",
) -> Optional[int]:
    """
    Decide which knapsack is best *right now* for placing `item_id`, or None if none fits.

    Parameters
    ----------
    state : AssignmentState
        Current residual capacities (read only here).
    item_id : int
        The item to place.
    strategy : str
        One of: "first_fit", "best_fit", "max_remaining".

    Returns
    -------
    Optional[int]
        The chosen knapsack index, or None if infeasible.
    """
    if strategy == "first_fit":
        return _first_fit(state, item_id)

    feas = [k for k in range(state.num_knapsacks) if state.can_assign(item_id, k)]
    if not feas:
        return None
    if strategy == "best_fit":
        return _best_fit(state, item_id, feas)
    if strategy == "max_remaining":
        return _max_remaining(state, feas)

    raise ValueError(
        f"Unknown placement strategy: {strategy}. "
        "Expected one of: first_fit, best_fit, max_remaining."
    )

# -*- coding: utf-8 -*-
"""
Placement (Place Next) for the greedy constructor.

Single-step API that:
  1) Chooses a knapsack for an item via heuristics (no mutation there).
  2) Commits the placement through AssignmentState.assign.
  3) Emits a PlacementDecision and optionally logs it via Tracker.
"""

from __future__ import annotations
import logging
from typing import Optional

from mkp.planning.policy import Policy
from mkp.planning.solution import PlacementDecision
from mkp.planning.state import AssignmentState
from mkp.heuristics.place_next.strategies import choose_knapsack
from .tracker import Tracker

logger = logging.getLogger(__name__)


def place_next(
    item_id: int,
    state: AssignmentState,
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> PlacementDecision:
    """
    Decide & commit placement for a single item.

    Parameters
    ----------
    item_id : int
        The item to place.
    state : AssignmentState
        Mutable state holding the current residual capacities.
    policy : Policy
        Uses policy.place_strategy.
    tracker : Tracker | None
        If provided, appends a CSV row with the decision and the remainders
        before and after it.

    Returns
    -------
    PlacementDecision
        item_id, chosen knapsack (or None), and a short reason label.
    """
    remaining_before = list(state.residual)

    chosen = choose_knapsack(state, item_id, strategy=policy.place_strategy)
    if chosen is None:
        decision = PlacementDecision(item_id=item_id, knapsack=None, reason="no_feasible_knapsack")
    else:
        state.assign(item_id, chosen)
        decision = PlacementDecision(item_id=item_id, knapsack=chosen, reason=policy.place_strategy)

    logger.debug(
        "item %d -> %s (%s)",
        item_id,
        "-" if decision.knapsack is None else decision.knapsack,
        decision.reason,
    )
    if tracker is not None:
        tracker.append_placement_decision(
            item=state.items[item_id],
            decision=decision,
            remaining_before=remaining_before,
            remaining_after=list(state.residual),
        )
    return decision

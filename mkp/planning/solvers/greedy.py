# -*- coding: utf-8 -*-
"""
Greedy constructor.

Pipeline:
  1) Build the item queue (Select Next): descending density, ties by ascending id.
  2) For each item in queue order, place it into the knapsack chosen by
     policy.place_strategy (first_fit by default: lowest index that fits).
     Items that fit nowhere stay unassigned.

The state is mutated in place and is expected to start all-unassigned.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from mkp.business_objects.items import Item
from mkp.planning.policy import Policy
from mkp.planning.solution import PlacementDecision
from mkp.planning.state import AssignmentState
from mkp.planning.selection_orchestrator import run_selection_phase
from mkp.planning.place_orchestrator import place_next
from mkp.planning.tracker import Tracker

logger = logging.getLogger(__name__)


def run_greedy(
    items: Sequence[Item],
    state: AssignmentState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> List[PlacementDecision]:
    """
    Fill `state` greedily.

    Parameters
    ----------
    items : Sequence[Item]
        The item catalog (same objects the state was built from).
    state : AssignmentState
        Empty state; mutated in place.
    policy : Policy | None
        Ordering and placement knobs; defaults to Policy().
    tracker : Tracker | None
        If provided, writes items.csv and placement_log.csv.

    Returns
    -------
    List[PlacementDecision]
        One decision per item, in processing order.
    """
    if policy is None:
        policy = Policy()

    ordered_ids = run_selection_phase(items, policy, tracker=tracker)
    decisions = [place_next(iid, state, policy, tracker=tracker) for iid in ordered_ids]

    placed = sum(1 for d in decisions if d.knapsack is not None)
    logger.debug("greedy placed %d of %d items", placed, len(decisions))
    return decisions

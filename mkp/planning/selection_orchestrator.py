# -*- coding: utf-8 -*-
"""
Selection (Select Next) for the greedy constructor.

Thin wrapper that connects Policy → Heuristics, and (optionally) writes a CSV
report of the sequencing via planning.Tracker.

- Reads feature order from Policy.select_order (default: density, then id)
- Calls the pure heuristic select_next() to produce a deterministic item queue
- Optionally writes items.csv if a Tracker is provided
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from mkp.business_objects.items import Item
from mkp.planning.policy import Policy
from mkp.heuristics.select_next.selector import select_next
from mkp.planning.tracker import Tracker


def run_selection_phase(
    items: Sequence[Item],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> List[int]:
    """
    Compute (and optionally log) the ordered list of item ids.

    Returns
    -------
    List[int]
        Ordered item ids (first = next to place).
    """
    ordered_ids = select_next(items, order=policy.select_order)

    if tracker is not None:
        tracker.write_selection_queue_csv(items, ordered_ids)

    return ordered_ids

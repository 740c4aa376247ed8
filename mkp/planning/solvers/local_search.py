# -*- coding: utf-8 -*-
"""
1-swap local search (first improvement).

A pass scans ordered pairs (i_out, i_in) lexicographically. A pair is a
candidate when i_out sits in some knapsack k, i_in is unassigned, i_in is
strictly more valuable, and i_in fits into k once i_out has been released.
The first candidate found is committed and the pass ends.

run_local_search repeats passes until one finds nothing. Every accepted swap
strictly raises the total value, which is bounded by the sum of all values,
so the loop terminates.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from mkp.planning.solution import SwapMove
from mkp.planning.state import UNASSIGNED, AssignmentState
from mkp.planning.tracker import Tracker

logger = logging.getLogger(__name__)


def improve_solution(
    state: AssignmentState,
    verify: bool = True,
) -> Optional[SwapMove]:
    """
    Run one first-improvement pass over the 1-swap neighborhood.

    Returns the accepted SwapMove, or None if the state is a local optimum.
    With `verify`, the total value is recomputed after a tentative swap and
    the swap is reverted unless the total strictly increased.
    """
    items = state.items
    current_value = state.total_value()

    for i_out in range(len(items)):
        out_k = state.knapsack_of(i_out)
        if out_k is UNASSIGNED:
            continue

        for i_in in range(len(items)):
            if i_in == i_out or state.knapsack_of(i_in) is not UNASSIGNED:
                continue

            gain = items[i_in].value - items[i_out].value
            if gain <= 0:
                continue

            # free the slot, then see whether the newcomer fits
            state.unassign(i_out)
            if not state.can_assign(i_in, out_k):
                state.assign(i_out, out_k)
                continue

            state.assign(i_in, out_k)
            if verify and not state.total_value() > current_value:
                state.unassign(i_in)
                state.assign(i_out, out_k)
                continue

            return SwapMove(item_out=i_out, item_in=i_in, knapsack=out_k, gain=gain)

    return None


def run_local_search(
    state: AssignmentState,
    verify: bool = True,
    tracker: Optional[Tracker] = None,
) -> List[SwapMove]:
    """
    Apply improve_solution until a pass yields no swap.

    Returns the accepted moves in the order they were applied.
    """
    moves: List[SwapMove] = []
    passes = 0
    while True:
        passes += 1
        move = improve_solution(state, verify=verify)
        logger.debug("pass %d: %s", passes, "no improving swap" if move is None else "swap accepted")
        if move is None:
            break
        moves.append(move)
        logger.debug(
            "swap %d: item %d out, item %d in (knapsack %d, gain %.6g)",
            len(moves), move.item_out, move.item_in, move.knapsack, move.gain,
        )
        if tracker is not None:
            tracker.append_swap(move, total_value=state.total_value(), remaining=list(state.residual))

    logger.info("local search converged after %d swap(s) in %d pass(es)", len(moves), passes)
    return moves

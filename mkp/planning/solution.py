# -*- coding: utf-8 -*-
"""
Solution and decision models for MKP planning results.

These data classes define the shape of outputs produced by the greedy
constructor and the local search, and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PlacementDecision:
    """
    Outcome of placing a single item (or failing to place).

    Attributes
    ----------
    item_id : int
        The item acted upon.
    knapsack : int | None
        The knapsack chosen, or None if no feasible knapsack was found.
    reason : str | None
        Optional short reason/label (e.g., "first_fit", "no_feasible_knapsack").
    """
    item_id: int
    knapsack: Optional[int]
    reason: Optional[str] = None


@dataclass(frozen=True)
class SwapMove:
    """
    An accepted 1-for-1 swap: `item_out` left `knapsack`, `item_in` took its place.
    """
    item_out: int
    item_in: int
    knapsack: int
    gain: float


@dataclass(frozen=True)
class Solution:
    """
    Snapshot of an assignment.

    Attributes
    ----------
    assignments : tuple[int | None, ...]
        assignments[i] is the knapsack of item i (None means not placed).
    total_value : float
        Sum of values for all placed items.
    remaining : tuple[float, ...]
        Remaining capacity per knapsack.
    """
    assignments: Tuple[Optional[int], ...]
    total_value: float
    remaining: Tuple[float, ...]

    @property
    def placed_count(self) -> int:
        return sum(1 for k in self.assignments if k is not None)

# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the MKP planning pipeline.

Greedy construction (Select Next) uses a direct feature-order list:
  - select_order: tuple[str, ...] | None
    The left→right priority of features. Allowed keys:
      * "density" (value/weight; always descending; higher is better)
      * "value"   (always descending)
      * "weight"  (descending = heavier first)
      * "-weight" (ascending  = lighter first)
      * "id"      (ascending; auto-appended by the selector as final tiebreaker)
    If None/empty, the selector defaults to ["density"] and then appends "id".

Greedy construction (Place Next):
  - place_strategy: {"first_fit","best_fit","max_remaining"}
  - eps: feasibility tolerance (0.0 = exact comparison)

Local search:
  - verify_swaps: recompute the total value after each tentative swap and
    revert unless it strictly increased.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

PLACE_STRATEGIES = ("first_fit", "best_fit", "max_remaining")
SELECT_KEYS = ("density", "value", "weight", "-weight", "id")


@dataclass(frozen=True)
class Policy:
    """
    Planning knobs (pure data holder).

    Attributes
    ----------
    # Select Next
    select_order : tuple[str, ...] | None
        Feature priority list. Examples:
          ("density",)
          ("value", "-weight")
        If None/empty, the selector will use its internal default and append "id".

    # Place Next
    place_strategy : str
        Knapsack ranking rule: "first_fit" | "best_fit" | "max_remaining".
    eps : float
        Feasibility tolerance for capacity checks; 0.0 compares exactly.

    # Local search
    verify_swaps : bool
        Keep the post-swap total-value recheck.
    """
    # Select Next
    select_order: Optional[Tuple[str, ...]] = None

    # Place Next
    place_strategy: str = "first_fit"
    eps: float = 0.0

    # Local search
    verify_swaps: bool = True

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.place_strategy not in PLACE_STRATEGIES:
            raise ValueError(
                f"Unknown placement strategy: {self.place_strategy}. "
                f"Expected one of: {', '.join(PLACE_STRATEGIES)}."
            )
        if self.eps < 0:
            raise ValueError(f"Policy.eps must be >= 0, got {self.eps}.")
        for key in self.select_order or ():
            if key not in SELECT_KEYS:
                raise ValueError(f"Unknown order key '{key}'. Allowed: {list(SELECT_KEYS)}")

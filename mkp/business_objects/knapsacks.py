# -*- coding: utf-8 -*-
"""
Knapsack models for MKP.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import StateValidationError


@dataclass(frozen=True)
class KnapsackSpec:
    """
    Immutable knapsack template.

    Attributes
    ----------
    index : int
        Position of the knapsack (0..m-1).
    capacity : float
        Positive capacity limit.
    """
    index: int
    capacity: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.index < 0:
            raise StateValidationError(f"KnapsackSpec.index must be >= 0, got {self.index}.")
        if not math.isfinite(self.capacity) or self.capacity <= 0:
            raise StateValidationError(f"KnapsackSpec[{self.index}] capacity must be > 0.")


def build_knapsacks(capacities: Iterable[float]) -> Tuple[KnapsackSpec, ...]:
    """Build knapsack templates from a sequence of positive capacities."""
    return tuple(
        KnapsackSpec(index=k, capacity=float(cap)) for k, cap in enumerate(capacities)
    )

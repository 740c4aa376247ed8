# -*- coding: utf-8 -*-
"""
Run-time state containers for the MKP planning pipeline.

This module defines:
  - SelectionState:  immutable input snapshot (item catalog + knapsack specs)
  - AssignmentState: mutable feasible solution created from SelectionState

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.knapsacks.KnapsackSpec
- AssignmentState keeps the residual capacity of every knapsack in step with
  the assignment vector, so no mutator ever needs a full rescan:

      residual[k] == capacity[k] - sum(weight(i) for i with assignment[i] == k)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from mkp.business_objects.errors import StateValidationError
from mkp.business_objects.items import Item
from mkp.business_objects.knapsacks import KnapsackSpec

from .solution import Solution

DEFAULT_EPS = 0.0

# Knapsack slot of an item that is not placed anywhere.
UNASSIGNED: Optional[int] = None


# ----------------------------
# Immutable input snapshot
# ----------------------------

@dataclass(frozen=True)
class SelectionState:
    """
    Immutable problem input for a planning run.

    Attributes
    ----------
    items : tuple[Item, ...]
        Item catalog; items[i].id == i.
    knapsacks : tuple[KnapsackSpec, ...]
        Knapsack templates; knapsacks[k].index == k.
    """
    items: Tuple[Item, ...]
    knapsacks: Tuple[KnapsackSpec, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "knapsacks", tuple(self.knapsacks))

        for pos, it in enumerate(self.items):
            if it.id != pos:
                raise StateValidationError(
                    f"Item at position {pos} has id {it.id}; ids must equal positions."
                )
        for pos, ks in enumerate(self.knapsacks):
            if ks.index != pos:
                raise StateValidationError(
                    f"Knapsack at position {pos} has index {ks.index}; indices must equal positions."
                )

    @property
    def capacities(self) -> Tuple[float, ...]:
        return tuple(ks.capacity for ks in self.knapsacks)

    def to_runtime(self, eps: float = DEFAULT_EPS) -> "AssignmentState":
        """
        Create a fresh, all-unassigned AssignmentState.
        Items are immutable, so we share references safely.
        """
        return AssignmentState(items=self.items, capacities=self.capacities, eps=eps)


# ----------------------------
# Mutable working state
# ----------------------------

@dataclass
class AssignmentState:
    """
    Mutable feasible solution used during construction and refinement.

    Attributes
    ----------
    items : tuple[Item, ...]
        Treat as read-only; shared with clones.
    capacities : tuple[float, ...]
        Original knapsack capacities; shared with clones.
    eps : float
        Tolerance for fit checks and the non-negative residual assertion.
    assignment : list[int | None]
        assignment[i] is the knapsack index of item i, or UNASSIGNED.
    residual : list[float]
        Remaining free capacity per knapsack.
    """
    items: Tuple[Item, ...]
    capacities: Tuple[float, ...]
    eps: float = DEFAULT_EPS
    assignment: List[Optional[int]] = field(init=False)
    residual: List[float] = field(init=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        self.items = tuple(self.items)
        self.capacities = tuple(float(c) for c in self.capacities)
        for k, cap in enumerate(self.capacities):
            if not cap > 0:
                raise StateValidationError(f"Knapsack[{k}] capacity must be > 0, got {cap}.")
        self.assignment = [UNASSIGNED] * len(self.items)
        self.residual = list(self.capacities)

    # ---- sizes ----
    @property
    def num_items(self) -> int:
        return len(self.items)

    @property
    def num_knapsacks(self) -> int:
        return len(self.capacities)

    # ---- index guards ----
    def _check_item(self, i: int) -> None:
        if not 0 <= i < len(self.items):
            raise IndexError(f"item index {i} out of range [0, {len(self.items)})")

    def _check_knapsack(self, k: int) -> None:
        if not 0 <= k < len(self.capacities):
            raise IndexError(f"knapsack index {k} out of range [0, {len(self.capacities)})")

    # ---- queries ----
    def total_value(self) -> float:
        """Sum of values of all placed items (recomputed from the assignment)."""
        return sum(
            self.items[i].value for i, k in enumerate(self.assignment) if k is not UNASSIGNED
        )

    def knapsack_of(self, i: int) -> Optional[int]:
        self._check_item(i)
        return self.assignment[i]

    def can_assign(self, i: int, k: int) -> bool:
        """
        True if item i fits in the current residual capacity of knapsack k.
        Does not consider where i is currently placed.
        """
        self._check_item(i)
        self._check_knapsack(k)
        return self.items[i].weight <= self.residual[k] + self.eps

    def items_in(self, k: int) -> List[int]:
        self._check_knapsack(k)
        return [i for i, kk in enumerate(self.assignment) if kk == k]

    def used_capacity(self, k: int) -> float:
        self._check_knapsack(k)
        return self.capacities[k] - self.residual[k]

    def assignment_vector(self) -> List[int]:
        """Assignment with unplaced items rendered as -1."""
        return [-1 if k is UNASSIGNED else k for k in self.assignment]

    # ---- mutations ----
    def assign(self, i: int, k: int) -> None:
        """
        Place item i into knapsack k, first releasing it from any knapsack it
        currently occupies. The caller must have checked the fit.
        """
        self._check_item(i)
        self._check_knapsack(k)
        weight = self.items[i].weight

        prev = self.assignment[i]
        if prev is not UNASSIGNED:
            self.residual[prev] += weight

        self.assignment[i] = k
        self.residual[k] -= weight
        assert self.residual[k] >= -self.eps, (
            f"knapsack {k} over-committed by item {i}: residual {self.residual[k]}"
        )

    def unassign(self, i: int) -> None:
        """Release item i from its knapsack; no-op if it is not placed."""
        self._check_item(i)
        k = self.assignment[i]
        if k is not UNASSIGNED:
            self.residual[k] += self.items[i].weight
            self.assignment[i] = UNASSIGNED

    # ---- copies / snapshots ----
    def clone(self) -> "AssignmentState":
        """
        Copy the assignment and residual vectors; the item catalog and the
        original capacities are shared.
        """
        twin = AssignmentState.__new__(AssignmentState)
        twin.items = self.items
        twin.capacities = self.capacities
        twin.eps = self.eps
        twin.assignment = list(self.assignment)
        twin.residual = list(self.residual)
        return twin

    __copy__ = clone

    def to_solution(self) -> Solution:
        """Freeze the current state into a Solution record."""
        return Solution(
            assignments=tuple(self.assignment),
            total_value=float(self.total_value()),
            remaining=tuple(float(r) for r in self.residual),
        )

    def validate(self) -> None:
        """
        Full rescan of the capacity bookkeeping. Raises StateValidationError if
        any assignment entry is out of range, any residual is negative, or any
        residual disagrees with the weights placed in its knapsack.
        """
        m = len(self.capacities)
        if len(self.assignment) != len(self.items):
            raise StateValidationError("assignment length does not match item count.")
        if len(self.residual) != m:
            raise StateValidationError("residual length does not match knapsack count.")

        loads = [0.0] * m
        for i, k in enumerate(self.assignment):
            if k is UNASSIGNED:
                continue
            if not isinstance(k, int) or not 0 <= k < m:
                raise StateValidationError(f"Item[{i}] assigned to invalid knapsack {k!r}.")
            loads[k] += self.items[i].weight

        tol = max(self.eps, 1e-9)
        for k in range(m):
            if self.residual[k] < -self.eps:
                raise StateValidationError(f"Knapsack[{k}] residual is negative: {self.residual[k]}.")
            expected = self.capacities[k] - loads[k]
            if abs(self.residual[k] - expected) > tol * max(1.0, self.capacities[k]):
                raise StateValidationError(
                    f"Knapsack[{k}] residual {self.residual[k]} != capacity - load {expected}."
                )

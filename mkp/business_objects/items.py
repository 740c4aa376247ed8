# -*- coding: utf-8 -*-
"""
Item model for MKP.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    An item that can be assigned to at most one knapsack.

    Attributes
    ----------
    id : int
        Position of the item in its catalog.
    value : float
        Positive objective contribution if placed.
    weight : float
        Positive weight (capacity consumption).
    density : float
        value / weight, derived once at construction.
    """
    id: int
    value: float
    weight: float
    density: float = field(init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise StateValidationError(f"Item.id must be an integer, got {self.id!r}.")
        if self.id < 0:
            raise StateValidationError(f"Item.id must be >= 0, got {self.id}.")
        if not math.isfinite(self.value) or self.value <= 0:
            raise StateValidationError(f"Item[{self.id}] value must be > 0.")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise StateValidationError(f"Item[{self.id}] weight must be > 0.")
        object.__setattr__(self, "density", self.value / self.weight)


def build_catalog(rows: Iterable[Sequence[float]]) -> Tuple[Item, ...]:
    """
    Build an item catalog from ``(id, value, weight)`` rows.

    The id of every row must equal its position; the catalog is indexed by id.
    """
    catalog = []
    for pos, row in enumerate(rows):
        if len(row) != 3:
            raise StateValidationError(
                f"Catalog row {pos}: expected (id, value, weight), got {tuple(row)!r}."
            )
        iid, value, weight = row
        if int(iid) != pos:
            raise StateValidationError(
                f"Catalog row {pos}: item id {iid} does not match its position."
            )
        catalog.append(Item(id=pos, value=float(value), weight=float(weight)))
    return tuple(catalog)

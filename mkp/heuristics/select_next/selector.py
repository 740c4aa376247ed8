# -*- coding: utf-8 -*-
"""
Select Next (item sequencing) for the greedy constructor.

You provide an `order` list defining priority left→right.

Direction rules (fixed):
  - density -> descending (higher first)
  - value   -> descending (higher first)
  - weight  -> descending
  - -weight -> ascending (lighter first)
  - id      -> ascending (only used as final deterministic tiebreaker)

We always append 'id' at the end if missing, so the resulting order never
depends on the stability of the sort.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from mkp.business_objects.items import Item
from mkp.planning.policy import SELECT_KEYS

_DEFAULT_ORDER = ("density",)


def _normalize_order(order: Sequence[str] | None) -> List[str]:
    """
    Normalize the user-provided order:
      - Default to ["density"] if None/empty
      - Keep first occurrence only (deduplicate while preserving order)
      - Validate keys against the allowed set
      - Ensure 'id' is present as the final key
    """
    norm: List[str] = []
    seen: set[str] = set()
    for raw in order or _DEFAULT_ORDER:
        key = str(raw).strip()
        if key not in SELECT_KEYS:
            raise ValueError(f"Unknown order key '{key}'. Allowed: {list(SELECT_KEYS)}")
        if key not in seen:
            seen.add(key)
            norm.append(key)

    if "id" not in norm:
        norm.append("id")
    return norm


def _sort_key_for_item(item: Item, order_keys: List[str]) -> Tuple:
    """
    Build a Python sort key tuple following our direction rules.

    Python sorts ascending; for "descending" we negate numeric values.
    """
    key: list = []
    for k in order_keys:
        if k == "id":
            key.append(item.id)
        elif k == "density":
            key.append(-item.density)
        elif k == "value":
            key.append(-item.value)
        elif k == "weight":
            key.append(-item.weight)
        elif k == "-weight":
            key.append(item.weight)
        else:
            raise AssertionError(f"Unhandled order key: {k}")
    return tuple(key)


def select_next(
    items: Sequence[Item],
    order: Sequence[str] | None = None,
) -> List[int]:
    """
    Return an ordered list of item ids according to `order`.

    Examples:
      ["density"]            # default: best value per unit weight first
      ["value", "-weight"]

    No mutation occurs here; 'id' is always the final tiebreaker (ascending).
    """
    order_keys = _normalize_order(order)
    sortable = [(it.id, _sort_key_for_item(it, order_keys)) for it in items]
    sortable.sort(key=lambda t: t[1])
    return [iid for iid, _ in sortable]

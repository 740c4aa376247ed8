# -*- coding: utf-8 -*-
"""
I/O helpers for loading MKP problem definitions.

This module includes lightweight JSON readers that match the
`problems/<name>/{items.json, knapsacks.json}` structure.

JSON formats:
- items.json      : [{"id": <int, optional>, "value": <number>, "weight": <number>}, ...]
- knapsacks.json  : [{"capacity": <number>}, ...]  or  [<number>, ...]

Item ids, when present, must equal the item's position in the array.
These map directly to:
- business_objects.items.Item
- business_objects.knapsacks.KnapsackSpec
"""

from __future__ import annotations
import json
from typing import Any, List

from mkp.business_objects.errors import SchemaError
from mkp.business_objects.items import Item
from mkp.business_objects.knapsacks import KnapsackSpec
from mkp.planning.state import SelectionState


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _load_array(path: str) -> List[Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")
    return data


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - value (number)
      - weight (number)
      - id (int, optional; must equal the element's position)
    """
    items: List[Item] = []
    for idx, obj in enumerate(_load_array(path)):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            value = float(_require(obj, "value", path))
            weight = float(_require(obj, "weight", path))
            iid = int(obj.get("id", idx))
        except (TypeError, ValueError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
        if iid != idx:
            raise SchemaError(f"{path}[{idx}]: item id {iid} does not match its position.")
        items.append(Item(id=idx, value=value, weight=weight))
    return items


def read_knapsacks_json(path: str) -> List[KnapsackSpec]:
    """
    Load knapsacks from a JSON array. Each element is either a number or an
    object with:
      - capacity (number)
    """
    knaps: List[KnapsackSpec] = []
    for idx, obj in enumerate(_load_array(path)):
        try:
            if isinstance(obj, dict):
                capacity = float(_require(obj, "capacity", path))
            else:
                capacity = float(obj)
        except (TypeError, ValueError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
        knaps.append(KnapsackSpec(index=idx, capacity=capacity))
    return knaps


def read_problem(items_path: str, knapsacks_path: str) -> SelectionState:
    """Load both files into an immutable SelectionState."""
    return SelectionState(
        items=tuple(read_items_json(items_path)),
        knapsacks=tuple(read_knapsacks_json(knapsacks_path)),
    )

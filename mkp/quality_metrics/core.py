# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for MKP runs.
- No side effects
- No external dependencies
- Works off SelectionState and a Solution snapshot

Public API:
  - compute_global_metrics(state, solution) -> Dict[str, float]
  - per_knapsack_metrics(state, solution) -> List[Dict]
"""

from __future__ import annotations
from typing import Any, Dict, List
import math

from mkp.planning.solution import Solution
from mkp.planning.state import SelectionState


# ---------------------------------------------------------------------------
# 1) Global metrics (TV, OU, SR, VWE, AVK, BL, Used/Remaining)
# ---------------------------------------------------------------------------
def compute_global_metrics(state: SelectionState, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "TV": ...,           # total value
        "OU": ...,           # overall utilization, percent (0..100)
        "SR": ...,           # selection rate, percent (0..100)
        "VWE": ...,          # value per unit of used weight
        "AVK": ...,          # average value per knapsack
        "BL": ...,           # std dev of knapsack loads
        "Used Sum": ...,
        "Remaining Sum": ...,
        "Total Items": ...,
        "Placed Items": ...,
        "Num Knapsacks": ...,
        "Capacity Sum": ...,
        "Total Possible Value": ...
      }
    """
    total_items = len(state.items)
    placed_items = solution.placed_count
    num_knapsacks = len(state.knapsacks)

    capacity_sum = sum(float(k.capacity) for k in state.knapsacks)
    rem_sum = sum(float(r) for r in solution.remaining)
    used_sum = max(0.0, capacity_sum - rem_sum)

    TV = float(solution.total_value)
    OU = 0.0 if capacity_sum == 0.0 else (used_sum / capacity_sum) * 100.0
    SR = 0.0 if total_items == 0 else (placed_items / total_items) * 100.0

    total_weight_used = sum(
        float(state.items[i].weight) for i, k in enumerate(solution.assignments) if k is not None
    )
    VWE = 0.0 if total_weight_used == 0.0 else TV / total_weight_used
    AVK = 0.0 if num_knapsacks == 0 else TV / num_knapsacks

    loads = [float(k.capacity) - float(solution.remaining[k.index]) for k in state.knapsacks]
    if loads:
        mean_load = sum(loads) / len(loads)
        BL = math.sqrt(sum((x - mean_load) ** 2 for x in loads) / len(loads))
    else:
        BL = 0.0

    total_possible_value = sum(float(it.value) for it in state.items)

    return {
        "TV": TV,
        "OU": float(OU),
        "SR": float(SR),
        "VWE": float(VWE),
        "AVK": float(AVK),
        "BL": float(BL),
        "Used Sum": float(used_sum),
        "Remaining Sum": float(rem_sum),
        "Total Items": float(total_items),
        "Placed Items": float(placed_items),
        "Num Knapsacks": float(num_knapsacks),
        "Capacity Sum": float(capacity_sum),
        "Total Possible Value": float(total_possible_value),
    }


# ---------------------------------------------------------------------------
# 2) Per-knapsack metrics
# ---------------------------------------------------------------------------
def per_knapsack_metrics(state: SelectionState, solution: Solution) -> List[Dict[str, Any]]:
    """
    Returns one dict per knapsack with:
      knapsack, capacity, used, remaining, utilization_pct, items_placed, value_sum
    """
    value_by_knap = [0.0] * len(state.knapsacks)
    count_by_knap = [0] * len(state.knapsacks)
    for i, k in enumerate(solution.assignments):
        if k is None:
            continue
        value_by_knap[k] += float(state.items[i].value)
        count_by_knap[k] += 1

    rows: List[Dict[str, Any]] = []
    for ks in state.knapsacks:
        cap = float(ks.capacity)
        rem = float(solution.remaining[ks.index])
        used = max(0.0, cap - rem)
        util = 0.0 if cap == 0.0 else (used / cap) * 100.0
        rows.append({
            "knapsack": ks.index,
            "capacity": cap,
            "used": float(used),
            "remaining": rem,
            "utilization_pct": float(util),
            "items_placed": int(count_by_knap[ks.index]),
            "value_sum": float(value_by_knap[ks.index]),
        })
    return rows

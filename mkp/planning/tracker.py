# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for greedy construction and local search.

Files produced (when Tracker is used):
  - items.csv              (greedy queue; written by write_selection_queue_csv)
  - placement_log.csv      (append-as-you-go during greedy placement)
  - swap_log.csv           (append-as-you-go during local search)
  - assignments.csv        (final per-item assignment snapshot)
  - per_knapsack.csv       (per-knapsack KPIs)
  - problem_summary.csv    (global KPIs)

Notes
-----
- Callers decide when to invoke these writers; the two-stage solver calls the
  final writers at the end.
- Unplaced items are written with knapsack -1.
"""

from __future__ import annotations
import csv
import json
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from mkp.business_objects.items import Item
from mkp.planning.solution import PlacementDecision, Solution, SwapMove
from mkp.planning.state import SelectionState
from mkp.quality_metrics.core import compute_global_metrics, per_knapsack_metrics


def _knap_cell(k: Optional[int]) -> int:
    return -1 if k is None else k


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _placement_log_path: str = field(init=False, repr=False)
    _swap_log_path: str = field(init=False, repr=False)
    _placement_started: bool = field(default=False, init=False, repr=False)
    _placement_step_idx: int = field(default=0, init=False, repr=False)
    _swap_started: bool = field(default=False, init=False, repr=False)
    _swap_step_idx: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._placement_log_path = os.path.join(self.out_dir, "placement_log.csv")
        self._swap_log_path = os.path.join(self.out_dir, "swap_log.csv")

    @property
    def placement_log_path(self) -> str:
        return self._placement_log_path

    @property
    def swap_log_path(self) -> str:
        return self._swap_log_path

    # -----------------------------
    # Greedy: selection queue CSV
    # -----------------------------
    def write_selection_queue_csv(
        self,
        items: Sequence[Item],
        ordered_item_ids: List[int],
        filename: str = "items.csv",
    ) -> str:
        """
        Persist the greedy item ordering to CSV.

        Columns:
          order_index, item_id, value, weight, density
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "item_id", "value", "weight", "density"])
            for idx, iid in enumerate(ordered_item_ids):
                it = items[iid]
                w.writerow([idx, iid, float(it.value), float(it.weight), float(it.density)])
        return path

    # -----------------------------
    # Greedy: placement log CSV
    # -----------------------------
    def append_placement_decision(
        self,
        item: Item,
        decision: PlacementDecision,
        remaining_before: List[float],
        remaining_after: List[float],
    ) -> str:
        """
        Append a single placement decision row.

        Columns:
          - remaining_before_json / remaining_after_json: residual capacity
            of every knapsack around this step
          - closest_fit_margin: min non-negative (remaining_before[k] - weight);
            if none feasible, the least-negative margin
          - feasible_knaps_count: knapsacks with remaining_before[k] >= weight
        """
        if not self._placement_started:
            with open(self._placement_log_path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow([
                    "step_index",
                    "item_id",
                    "knapsack",
                    "value",
                    "weight",
                    "reason",
                    "remaining_before_json",
                    "remaining_after_json",
                    "closest_fit_margin",
                    "feasible_knaps_count",
                ])
            self._placement_started = True

        wj = float(item.weight)
        margins = [float(rem) - wj for rem in remaining_before]
        feasible_knaps_count = sum(1 for m in margins if m >= 0.0)
        if feasible_knaps_count > 0:
            closest_fit_margin: Optional[float] = min(m for m in margins if m >= 0.0)
        else:
            closest_fit_margin = max(margins) if margins else None

        with open(self._placement_log_path, "a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow([
                self._placement_step_idx,
                item.id,
                _knap_cell(decision.knapsack),
                float(item.value),
                wj,
                decision.reason or "",
                json.dumps(remaining_before),
                json.dumps(remaining_after),
                "" if closest_fit_margin is None else round(closest_fit_margin, 5),
                feasible_knaps_count,
            ])

        self._placement_step_idx += 1
        return self._placement_log_path

    # -----------------------------
    # Local search: swap log CSV
    # -----------------------------
    def append_swap(self, move: SwapMove, total_value: float, remaining: List[float]) -> str:
        """
        Append one accepted swap.

        Columns:
          step_index, item_out, item_in, knapsack, gain, total_value, remaining_json
        """
        if not self._swap_started:
            with open(self._swap_log_path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow([
                    "step_index", "item_out", "item_in", "knapsack",
                    "gain", "total_value", "remaining_json",
                ])
            self._swap_started = True

        with open(self._swap_log_path, "a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow([
                self._swap_step_idx,
                move.item_out,
                move.item_in,
                move.knapsack,
                float(move.gain),
                float(total_value),
                json.dumps(remaining),
            ])
        self._swap_step_idx += 1
        return self._swap_log_path

    # -----------------------------
    # Final artifacts after solve
    # -----------------------------
    def write_assignments_csv(
        self,
        state: SelectionState,
        solution: Solution,
        filename: str = "assignments.csv",
    ) -> str:
        """
        Final per-item assignment snapshot.

        Columns:
          item_id, knapsack, value, weight, placed (0/1)
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["item_id", "knapsack", "value", "weight", "placed"])
            for it in state.items:
                k = solution.assignments[it.id]
                w.writerow([
                    it.id,
                    _knap_cell(k),
                    float(it.value),
                    float(it.weight),
                    0 if k is None else 1,
                ])
        return path

    def write_per_knapsack_csv(
        self,
        state: SelectionState,
        solution: Solution,
        filename: str = "per_knapsack.csv",
    ) -> str:
        """
        Per-knapsack KPIs.

        Columns:
          knapsack, capacity, used, remaining, utilization_pct, items_placed, value_sum
        """
        path = os.path.join(self.out_dir, filename)
        rows = per_knapsack_metrics(state, solution)
        columns = ["knapsack", "capacity", "used", "remaining",
                   "utilization_pct", "items_placed", "value_sum"]
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=columns)
            w.writeheader()
            w.writerows(rows)
        return path

    def write_problem_summary_csv(
        self,
        state: SelectionState,
        solution: Solution,
        greedy_value: Optional[float] = None,
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Global KPIs across all knapsacks, one header row and one data row.

        If `greedy_value` is given, a "Greedy Value" column is prepended so the
        improvement made by local search is visible.
        """
        path = os.path.join(self.out_dir, filename)
        metrics = compute_global_metrics(state, solution)

        header: List[str] = []
        row: List[str] = []
        if greedy_value is not None:
            header.append("Greedy Value")
            row.append(f"{float(greedy_value):.3f}")
        for key, val in metrics.items():
            header.append(key)
            row.append(f"{val:.3f}")

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(header)
            w.writerow(row)
        return path

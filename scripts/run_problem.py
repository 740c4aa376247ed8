#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the two-stage MKP solver (greedy + 1-swap local search) on one problem.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - items.csv              (greedy ranking)
  - placement_log.csv      (step-by-step placements with diagnostics)
  - swap_log.csv           (accepted local-search swaps)
  - assignments.csv        (final per-item assignment)
  - per_knapsack.csv       (per-knapsack KPIs)
  - problem_summary.csv    (global KPIs)
"""

from __future__ import annotations
import logging
import os

# ====== CONFIGURATION ======
ITEMS_PATH = "problems/reference/items.json"
KNAPS_PATH = "problems/reference/knapsacks.json"
OUT_DIR = "reports/reference"
LOG_DIR = "logs"

# Greedy feature priority (left→right); allowed: "density", "value", "weight", "-weight"
SELECT_ORDER = ["density"]

# Greedy knapsack choice: "first_fit", "best_fit", "max_remaining"
PLACE_STRATEGY = "first_fit"

# Feasibility tolerance and post-swap recheck
EPS = 0.0
VERIFY_SWAPS = True
# ===========================

from mkp.planning import Policy
from mkp.planning.solvers.two_stage import run_two_stage
from mkp.planning.tracker import Tracker
from mkp.utils.logger import setup_logger
from mkp.utils.read_jsons import read_problem

logger = logging.getLogger("run_problem")


def main() -> None:
    setup_logger("run_problem", LOG_DIR)

    selection = read_problem(ITEMS_PATH, KNAPS_PATH)

    logger.info("Number of items: %d", len(selection.items))
    logger.info("Number of knapsacks: %d", len(selection.knapsacks))
    for ks in selection.knapsacks:
        logger.info("  Knapsack %d: capacity %g", ks.index, ks.capacity)
    for it in selection.items:
        logger.info("  Item %d: value=%g, weight=%g", it.id, it.value, it.weight)

    policy = Policy(
        select_order=tuple(SELECT_ORDER),
        place_strategy=PLACE_STRATEGY,
        eps=EPS,
        verify_swaps=VERIFY_SWAPS,
    )
    tracker = Tracker(out_dir=OUT_DIR)

    result = run_two_stage(selection, policy, tracker=tracker)

    print("\n=== Two-Stage Solve Complete ===")
    print(f"Greedy total value:   {result.greedy.total_value:.2f}")
    print(f"Improved total value: {result.final.total_value:.2f}")
    print("Final assignments (item -> knapsack, -1 = not placed):")
    for i, k in enumerate(result.state.assignment_vector()):
        print(f"  Item {i} -> {k}")
    print("Remaining capacities per knapsack:")
    for k, rem in enumerate(result.final.remaining):
        print(f"  - {k}: {rem:.4f}")

    print(f"\nArtifacts written under: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()

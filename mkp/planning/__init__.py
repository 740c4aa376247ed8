# -*- coding: utf-8 -*-
"""
Planning layer public API for the MKP pipeline.

This module exposes the core planning-time data contracts:
  - State models (SelectionState, AssignmentState, UNASSIGNED)
  - Policy configuration
  - Solution, PlacementDecision and SwapMove models

Other planning modules (orchestrators, solvers, tracker) are intentionally
not exported here to avoid cluttering the namespace. They should be imported
explicitly when needed.
"""

from .state import SelectionState, AssignmentState, UNASSIGNED
from .policy import Policy
from .solution import PlacementDecision, Solution, SwapMove

__all__ = [
    "SelectionState",
    "AssignmentState",
    "UNASSIGNED",
    "Policy",
    "PlacementDecision",
    "Solution",
    "SwapMove",
]

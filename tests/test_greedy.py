# -*- coding: utf-8 -*-
import pytest

from mkp.business_objects import build_catalog
from mkp.heuristics.place_next.strategies import choose_knapsack
from mkp.heuristics.select_next.selector import select_next
from mkp.planning import UNASSIGNED, Policy
from mkp.planning.solvers.greedy import run_greedy

from conftest import assert_feasible, make_selection


# -----------------------------
# Select Next
# -----------------------------

def test_density_order_reference(reference_selection):
    assert select_next(reference_selection.items) == [3, 4, 5, 1, 0, 2]


def test_density_ties_break_by_ascending_id():
    items = build_catalog([(0, 5, 3), (1, 10, 6), (2, 5, 3), (3, 20, 5)])
    assert select_next(items) == [3, 0, 1, 2]


def test_custom_order_keys():
    items = build_catalog([(0, 10, 4), (1, 10, 2), (2, 30, 9)])
    assert select_next(items, ["value", "-weight"]) == [2, 1, 0]
    assert select_next(items, ["weight"]) == [2, 0, 1]


def test_unknown_order_key_rejected():
    items = build_catalog([(0, 1, 1)])
    with pytest.raises(ValueError):
        select_next(items, ["ratio"])


# -----------------------------
# Place Next
# -----------------------------

def test_first_fit_picks_lowest_index(reference_state):
    reference_state.assign(3, 0)  # residuals 10, 20
    assert choose_knapsack(reference_state, 5, "first_fit") == 0
    assert choose_knapsack(reference_state, 1, "first_fit") == 1


def test_best_fit_and_max_remaining(reference_state):
    reference_state.assign(3, 0)  # residuals 10, 20
    assert choose_knapsack(reference_state, 5, "best_fit") == 0
    assert choose_knapsack(reference_state, 5, "max_remaining") == 1


def test_no_knapsack_fits(reference_state):
    reference_state.assign(2, 0)
    reference_state.assign(1, 1)  # residuals 5, 8
    for strategy in ("first_fit", "best_fit", "max_remaining"):
        assert choose_knapsack(reference_state, 0, strategy) is None


def test_unknown_strategy(reference_state):
    with pytest.raises(ValueError):
        choose_knapsack(reference_state, 0, "worst_fit")


# -----------------------------
# Greedy constructor
# -----------------------------

def test_greedy_reference_instance(reference_selection, reference_state):
    decisions = run_greedy(reference_selection.items, reference_state)

    assert [(d.item_id, d.knapsack) for d in decisions] == [
        (3, 0), (4, 1), (5, 0), (1, None), (0, None), (2, None),
    ]
    assert decisions[3].reason == "no_feasible_knapsack"
    assert reference_state.assignment_vector() == [-1, -1, -1, 0, 1, 0]
    assert reference_state.residual == [4.0, 9.0]
    assert reference_state.total_value() == 145.0
    assert_feasible(reference_state)


def test_greedy_is_deterministic(reference_selection):
    runs = []
    for _ in range(3):
        state = reference_selection.to_runtime()
        run_greedy(reference_selection.items, state)
        runs.append((list(state.assignment), list(state.residual)))
    assert runs[0] == runs[1] == runs[2]


def test_greedy_leaves_oversized_items_unassigned():
    selection = make_selection([(0, 10, 10), (1, 20, 20)], [5])
    state = selection.to_runtime()
    decisions = run_greedy(selection.items, state)
    assert all(d.knapsack is None for d in decisions)
    assert state.assignment == [UNASSIGNED, UNASSIGNED]
    assert state.total_value() == 0.0


def test_greedy_equal_density_fills_knapsacks_in_id_order():
    selection = make_selection([(i, 5, 3) for i in range(4)], [3, 3, 3, 3])
    state = selection.to_runtime()
    run_greedy(selection.items, state)
    assert state.assignment == [0, 1, 2, 3]
    assert state.total_value() == 20.0


def test_greedy_respects_policy_strategy(reference_selection):
    state = reference_selection.to_runtime()
    run_greedy(reference_selection.items, state, Policy(place_strategy="max_remaining"))
    # 3 -> k0 (20 vs 20, lower index), 4 -> k1 (20 > 10), 5 -> k0 (10 > 9)
    assert state.assignment_vector() == [-1, -1, -1, 0, 1, 0]
    assert_feasible(state)


def test_policy_validation():
    with pytest.raises(ValueError):
        Policy(place_strategy="worst_fit")
    with pytest.raises(ValueError):
        Policy(eps=-1.0)
    with pytest.raises(ValueError):
        Policy(select_order=("ratio",))

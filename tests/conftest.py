# -*- coding: utf-8 -*-
import pytest

from mkp.business_objects import build_catalog, build_knapsacks
from mkp.planning import SelectionState


REFERENCE_ITEMS = [
    (0, 35, 10),
    (1, 50, 12),
    (2, 45, 15),
    (3, 60, 10),
    (4, 55, 11),
    (5, 30, 6),
]


def make_selection(rows, capacities):
    return SelectionState(items=build_catalog(rows), knapsacks=build_knapsacks(capacities))


@pytest.fixture
def reference_selection():
    return make_selection(REFERENCE_ITEMS, [20, 20])


@pytest.fixture
def reference_state(reference_selection):
    return reference_selection.to_runtime()


@pytest.fixture
def greedy_miss_selection():
    # density order places item 0 first, which blocks the more valuable item 1
    return make_selection([(0, 9, 5), (1, 10, 6)], [6])


def assert_feasible(state):
    """Capacity bookkeeping matches the assignment and nothing is over-committed."""
    for k, cap in enumerate(state.capacities):
        load = sum(state.items[i].weight for i, kk in enumerate(state.assignment) if kk == k)
        assert state.residual[k] >= 0
        assert state.residual[k] + load == pytest.approx(cap)
    state.validate()


def improving_pair_exists(state):
    """True if some unplaced item could replace a placed one for a strict gain."""
    for i_out, k in enumerate(state.assignment):
        if k is None:
            continue
        for i_in, kk in enumerate(state.assignment):
            if kk is not None or i_in == i_out:
                continue
            a, b = state.items[i_out], state.items[i_in]
            if b.value > a.value and b.weight - a.weight <= state.residual[k]:
                return True
    return False

# -*- coding: utf-8 -*-
import logging

import pytest

from mkp import run_two_stage
from mkp.planning import Policy, SwapMove
from mkp.planning.solvers.local_search import run_local_search

from conftest import REFERENCE_ITEMS, assert_feasible, improving_pair_exists, make_selection


@pytest.mark.parametrize(
    "rows, capacities, greedy_value, final_value, final_vector",
    [
        (REFERENCE_ITEMS, [20, 20], 145.0, 150.0, [0, -1, -1, 0, 1, -1]),
        ([(0, 10, 5)], [5], 10.0, 10.0, [0]),
        ([(0, 10, 10), (1, 20, 20)], [5], 0.0, 0.0, [-1, -1]),
        ([(0, 9, 5), (1, 10, 6)], [6], 9.0, 10.0, [-1, 0]),
        ([(i, 5, 3) for i in range(4)], [3, 3, 3, 3], 20.0, 20.0, [0, 1, 2, 3]),
    ],
    ids=["reference", "trivial-fit", "nothing-fits", "greedy-miss", "multi-knapsack-split"],
)
def test_end_to_end_scenarios(rows, capacities, greedy_value, final_value, final_vector):
    result = run_two_stage(make_selection(rows, capacities))

    assert result.greedy.total_value == greedy_value
    assert result.final.total_value == final_value
    assert result.state.assignment_vector() == final_vector
    assert len(result.decisions) == len(rows)
    assert_feasible(result.state)
    assert not improving_pair_exists(result.state)

    # refining a local optimum again is a no-op
    snapshot = result.state.clone()
    assert run_local_search(result.state) == []
    assert result.state.assignment == snapshot.assignment
    assert result.state.residual == snapshot.residual


def test_greedy_miss_records_swap():
    result = run_two_stage(make_selection([(0, 9, 5), (1, 10, 6)], [6]))
    assert [(m.item_out, m.item_in, m.knapsack) for m in result.swaps] == [(0, 1, 0)]
    assert result.greedy.assignments == (0, None)
    assert result.final.assignments == (None, 0)


def test_logs_greedy_and_improved_values(caplog):
    with caplog.at_level(logging.INFO, logger="mkp"):
        run_two_stage(make_selection([(0, 9, 5), (1, 10, 6)], [6]), Policy())
    messages = [r.getMessage() for r in caplog.records]
    assert "Initial solution value (greedy): 9" in messages
    assert any(m.startswith("Improved solution value: 10") for m in messages)


def test_reference_instance_swap(reference_selection):
    result = run_two_stage(reference_selection)
    assert result.greedy.assignments == (None, None, None, 0, 1, 0)
    assert result.swaps == [SwapMove(item_out=5, item_in=0, knapsack=0, gain=5.0)]
    assert result.final.assignments == (0, None, None, 0, 1, None)
    assert result.final.remaining == (0.0, 9.0)

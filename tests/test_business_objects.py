# -*- coding: utf-8 -*-
import math

import pytest

from mkp.business_objects import (
    Item,
    KnapsackSpec,
    StateValidationError,
    build_catalog,
    build_knapsacks,
)
from mkp.planning import SelectionState


def test_item_density_is_derived():
    item = Item(id=3, value=60, weight=10)
    assert item.density == 6.0


def test_item_is_immutable():
    item = Item(id=0, value=1, weight=1)
    with pytest.raises(AttributeError):
        item.value = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    "value, weight",
    [(0, 1), (-1, 1), (1, 0), (1, -2), (math.nan, 1), (1, math.inf)],
)
def test_item_rejects_non_positive_or_non_finite(value, weight):
    with pytest.raises(StateValidationError):
        Item(id=0, value=value, weight=weight)


def test_item_rejects_negative_id():
    with pytest.raises(StateValidationError):
        Item(id=-1, value=1, weight=1)


@pytest.mark.parametrize("iid", [1.5, 2.0, "3", True])
def test_item_rejects_non_integer_id(iid):
    with pytest.raises(StateValidationError, match="integer"):
        Item(id=iid, value=1, weight=1)


def test_build_catalog_indexes_by_position():
    catalog = build_catalog([(0, 35, 10), (1, 50, 12)])
    assert [it.id for it in catalog] == [0, 1]
    assert catalog[1].value == 50.0
    assert catalog[1].density == pytest.approx(50 / 12)


def test_build_catalog_rejects_id_position_mismatch():
    with pytest.raises(StateValidationError, match="does not match its position"):
        build_catalog([(0, 1, 1), (2, 1, 1)])


def test_build_catalog_rejects_malformed_row():
    with pytest.raises(StateValidationError):
        build_catalog([(0, 1)])


def test_build_knapsacks():
    specs = build_knapsacks([20, 15.5])
    assert specs == (KnapsackSpec(index=0, capacity=20.0), KnapsackSpec(index=1, capacity=15.5))


@pytest.mark.parametrize("capacity", [0, -3, math.nan])
def test_knapsack_rejects_bad_capacity(capacity):
    with pytest.raises(StateValidationError):
        build_knapsacks([10, capacity])


def test_selection_state_requires_positional_ids():
    items = (Item(id=1, value=1, weight=1),)
    with pytest.raises(StateValidationError):
        SelectionState(items=items, knapsacks=build_knapsacks([5]))


def test_selection_state_requires_positional_knapsacks():
    with pytest.raises(StateValidationError):
        SelectionState(items=build_catalog([(0, 1, 1)]), knapsacks=(KnapsackSpec(index=1, capacity=5),))


def test_selection_state_capacities(reference_selection):
    assert reference_selection.capacities == (20.0, 20.0)

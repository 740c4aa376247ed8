# -*- coding: utf-8 -*-
import json

import pytest

from mkp.business_objects import SchemaError, StateValidationError
from mkp.utils.read_jsons import read_items_json, read_knapsacks_json, read_problem


def _write(path, payload):
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload, encoding="utf-8")
    return str(path)


def test_read_problem(tmp_path):
    items = _write(tmp_path / "items.json", [
        {"id": 0, "value": 35, "weight": 10},
        {"value": 50, "weight": 12},
    ])
    knaps = _write(tmp_path / "knapsacks.json", [{"capacity": 20}, 15])

    selection = read_problem(items, knaps)
    assert [(it.id, it.value, it.weight) for it in selection.items] == [(0, 35.0, 10.0), (1, 50.0, 12.0)]
    assert selection.capacities == (20.0, 15.0)


def test_missing_key(tmp_path):
    path = _write(tmp_path / "items.json", [{"value": 1}])
    with pytest.raises(SchemaError, match="weight"):
        read_items_json(path)


def test_id_must_match_position(tmp_path):
    path = _write(tmp_path / "items.json", [{"id": 4, "value": 1, "weight": 1}])
    with pytest.raises(SchemaError):
        read_items_json(path)


def test_not_an_array(tmp_path):
    path = _write(tmp_path / "knapsacks.json", {"capacity": 3})
    with pytest.raises(SchemaError):
        read_knapsacks_json(path)


def test_bad_json(tmp_path):
    path = _write(tmp_path / "items.json", "[{")
    with pytest.raises(SchemaError):
        read_items_json(path)


def test_missing_file(tmp_path):
    with pytest.raises(SchemaError):
        read_items_json(str(tmp_path / "nope.json"))


def test_invalid_domain_values(tmp_path):
    items = _write(tmp_path / "items.json", [{"value": 3, "weight": 0}])
    with pytest.raises(StateValidationError):
        read_items_json(items)
    knaps = _write(tmp_path / "knapsacks.json", [0])
    with pytest.raises(StateValidationError):
        read_knapsacks_json(knaps)

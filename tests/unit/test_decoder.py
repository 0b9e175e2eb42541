from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest

from common.config import FieldKeys
from common.decoder import ShapeError, decode, decode_strict, get_list, get_str
from common.models import Location


def _body(elements: List[Any], key: str = "locations") -> bytes:
    return json.dumps({key: elements}).encode("utf-8")


def _loc(name: str, description: str = "Cafe", location: str = "Tech Spot 1") -> Dict[str, Any]:
    return {"name": name, "description": description, "location": location}


def test_single_valid_element():
    raw = b'{"locations":[{"name":"Entropy","description":"Cafe","location":"Tech Spot 1"}]}'
    out = decode(raw, "locations")
    assert out == [Location(name="Entropy", description="Cafe", location="Tech Spot 1")]


def test_str_input_accepted():
    raw = '{"locations":[{"name":"A","description":"B","location":"C"}]}'
    assert [loc.name for loc in decode(raw)] == ["A"]


def test_decode_is_deterministic():
    raw = _body([_loc("A"), {"name": 1}, _loc("B")])
    assert decode(raw) == decode(raw)


def test_order_preserved_with_invalid_elements_dropped():
    raw = _body([
        _loc("first"),
        {"name": "no-fields"},
        _loc("second"),
        "not an object",
        _loc("third"),
    ])
    assert [loc.name for loc in decode(raw)] == ["first", "second", "third"]


@pytest.mark.parametrize(
    "element",
    [
        {"name": "X"},
        {"name": "X", "description": "Y"},
        {"name": "X", "description": "Y", "location": None},
        {"name": "X", "description": 3, "location": "Z"},
        {"name": ["X"], "description": "Y", "location": "Z"},
        {"name": "X", "description": "Y", "location": {"lat": 1}},
        42,
        None,
        ["X", "Y", "Z"],
    ],
)
def test_invalid_elements_dropped(element):
    assert decode(_body([element])) == []


def test_extra_fields_ignored():
    el = {**_loc("A"), "hours": "9-5", "rating": 4.5}
    out = decode(_body([el]))
    assert out == [Location(name="A", description="Cafe", location="Tech Spot 1")]


def test_empty_strings_are_valid():
    out = decode(_body([_loc("", "", "")]))
    assert len(out) == 1
    assert out[0].name == ""


@pytest.mark.parametrize(
    "raw",
    [
        b"not json at all",
        b"",
        b"\xff\xfe\x00garbage",
        b'{"other": []}',
        b'{"locations": {"name": "A"}}',
        b'{"locations": "A"}',
        b'{"locations": null}',
        b"[]",
        b'"locations"',
    ],
)
def test_shape_failures_collapse_to_empty(raw):
    assert decode(raw) == []


@pytest.mark.parametrize(
    "raw",
    [b"{oops", b'{"other": []}', b'{"locations": 5}', b"[1, 2]"],
)
def test_decode_strict_raises_shape_error(raw):
    with pytest.raises(ShapeError):
        decode_strict(raw)


def test_custom_keys():
    raw = json.dumps(
        {"spots": [{"title": "A", "summary": "B", "where": "C"}, _loc("ignored")]}
    )
    keys = FieldKeys(name="title", description="summary", location="where")
    out = decode(raw, "spots", keys)
    assert out == [Location(name="A", description="B", location="C")]


def test_accessors_never_raise():
    assert get_str({"a": "x"}, "a") == "x"
    assert get_str({"a": 1}, "a") is None
    assert get_str(["a"], "a") is None
    assert get_str({}, "a") is None
    assert get_list({"a": [1]}, "a") == [1]
    assert get_list({"a": {}}, "a") is None
    assert get_list(None, "a") is None


def test_deeply_nested_body_collapses_to_empty():
    raw = b'{"locations":' + b"[" * 200000
    assert decode(raw) == []
    assert decode(b"[" * 200000) == []


def test_deeply_nested_body_is_a_shape_error_when_strict():
    with pytest.raises(ShapeError, match="nested too deeply"):
        decode_strict(b"[" * 200000)

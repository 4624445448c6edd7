from __future__ import annotations

from pathstore.addressing import delete_value, get_value, set_value, split_path
from pathstore.values import MISSING


def test_split_path():
    assert split_path("a.b.c") == ["a", "b", "c"]
    assert split_path("a") == ["a"]
    assert split_path("") == []


def test_get_value_nested_and_missing():
    doc = {"a": {"b": {"c": 1}}, "n": None, "s": "text"}
    assert get_value(doc, "a.b.c") == 1
    assert get_value(doc, "a.b") == {"c": 1}
    assert get_value(doc, "n") is None
    assert get_value(doc, "a.x") is MISSING
    assert get_value(doc, "a.b.c.d") is MISSING
    # intermediate is a string, not an object
    assert get_value(doc, "s.length") is MISSING
    assert get_value(doc, "") is MISSING


def test_set_value_creates_intermediates_in_place():
    doc: dict = {}
    out = set_value(doc, "a.b.c", [1, 2])
    assert out is doc
    assert doc == {"a": {"b": {"c": [1, 2]}}}

    set_value(doc, "a.d", True)
    assert doc == {"a": {"b": {"c": [1, 2]}, "d": True}}


def test_set_value_overwrites_non_object_intermediate():
    doc = {"a": 5, "l": [1, 2]}
    set_value(doc, "a.b", "x")
    set_value(doc, "l.first", 1)
    assert doc == {"a": {"b": "x"}, "l": {"first": 1}}


def test_set_value_empty_path_is_noop():
    doc = {"a": 1}
    assert set_value(doc, "", 2) is doc
    assert doc == {"a": 1}


def test_delete_value_missing_returns_false():
    doc = {"a": {"b": 1}, "s": "x"}
    assert delete_value(doc, "a.c") is False
    assert delete_value(doc, "x.y") is False
    assert delete_value(doc, "s.y") is False
    assert delete_value(doc, "") is False
    assert doc == {"a": {"b": 1}, "s": "x"}


def test_delete_value_without_prune_keeps_empty_parents():
    doc = {"a": {"b": {"c": 1}}}
    assert delete_value(doc, "a.b.c") is True
    assert doc == {"a": {"b": {}}}


def test_delete_value_prune_removes_empty_chain():
    doc = {"a": {"b": {"c": 1}}, "other": 1}
    assert delete_value(doc, "a.b.c", prune=True) is True
    assert doc == {"other": 1}


def test_delete_value_prune_stops_at_first_non_empty_ancestor():
    doc = {"a": {"keep": 1, "b": {"c": {"d": 1}}}}
    assert delete_value(doc, "a.b.c.d", prune=True) is True
    assert doc == {"a": {"keep": 1}}


def test_delete_value_prune_never_removes_root():
    doc = {"only": 1}
    assert delete_value(doc, "only", prune=True) is True
    assert doc == {}


def test_delete_value_null_is_present():
    doc = {"a": None}
    assert delete_value(doc, "a") is True
    assert doc == {}

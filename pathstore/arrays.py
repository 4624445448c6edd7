"""1-based, list-oriented operations on values addressed by path."""

from __future__ import annotations

from typing import Any

from .addressing import get_value, set_value, split_path
from .errors import InvalidPriorityError, TypeMismatchError
from .values import MISSING, Document, is_map, is_sequence


def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality for JSON values.

    Unlike ``==``, booleans never compare equal to numbers.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_map(a) and is_map(b):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[k], b[k]) for k in a)
    if is_sequence(a) and is_sequence(b):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    if is_map(a) or is_map(b) or is_sequence(a) or is_sequence(b):
        return False
    return a == b


def _sequence_at(doc: Document, path: str) -> list[Any]:
    current = get_value(doc, path)
    if current is MISSING:
        return []
    if not is_sequence(current):
        raise TypeMismatchError(f"Value at {path!r} is {type(current).__name__}, not a list")
    return current


def _check_priority(priority: Any) -> int:
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidPriorityError(f"Priority must be an integer, got {priority!r}")
    return priority


def push(doc: Document, path: str, value: Any) -> list[Any]:
    if not split_path(path):
        return []
    items = _sequence_at(doc, path)
    items.append(value)
    set_value(doc, path, items)
    return items


def unpush(doc: Document, path: str, value: Any) -> list[Any]:
    """Remove every element deep-equal to *value*."""
    if not split_path(path):
        return []
    items = [item for item in _sequence_at(doc, path) if not deep_equal(item, value)]
    set_value(doc, path, items)
    return items


def set_by_priority(doc: Document, path: str, value: Any, priority: int) -> list[Any]:
    """
    Replace the element at 1-based *priority*.

    ``len + 1`` appends; anything further out is rejected rather than
    padded.
    """
    if not split_path(path):
        return []
    items = _sequence_at(doc, path)
    priority = _check_priority(priority)
    if priority < 1 or priority > len(items) + 1:
        raise InvalidPriorityError(f"Priority {priority} out of range for list of length {len(items)}")
    if priority == len(items) + 1:
        items.append(value)
    else:
        items[priority - 1] = value
    set_value(doc, path, items)
    return items


def del_by_priority(doc: Document, path: str, priority: int) -> tuple[list[Any], bool]:
    """
    Remove the element at 1-based *priority*.

    Returns ``(items, removed)``; out-of-range priorities leave the
    document untouched.
    """
    if not split_path(path):
        return [], False
    items = _sequence_at(doc, path)
    priority = _check_priority(priority)
    if priority < 1 or priority > len(items):
        return items, False
    del items[priority - 1]
    set_value(doc, path, items)
    return items, True

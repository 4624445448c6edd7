"""Dot-path addressing over an in-memory document."""

from __future__ import annotations

import logging
from typing import Any

from .values import MISSING, Document, is_map

logger = logging.getLogger(__name__)


def split_path(path: str) -> list[str]:
    """Split ``"a.b.c"`` into segments. The empty path has no segments."""
    if not path:
        return []
    return path.split(".")


def get_value(doc: Document, path: str) -> Any:
    """
    Resolve *path* in *doc*.

    Returns MISSING when a segment is absent or an intermediate value is
    not an object. Never raises.
    """
    keys = split_path(path)
    if not keys:
        return MISSING
    current: Any = doc
    for key in keys:
        if not is_map(current) or key not in current:
            return MISSING
        current = current[key]
    return current


def set_value(doc: Document, path: str, value: Any) -> Document:
    """
    Assign *value* at *path*, creating intermediate objects as needed.

    An intermediate segment holding a non-object is replaced by a fresh
    object. Mutates and returns *doc*.
    """
    keys = split_path(path)
    if not keys:
        return doc
    *parents, last = keys
    target: dict[str, Any] = doc
    for key in parents:
        child = target.get(key, MISSING)
        if not is_map(child):
            if child is not MISSING:
                logger.debug("Overwriting non-object value at %r to set %r", key, path)
            child = {}
            target[key] = child
        target = child
    target[last] = value
    return doc


def delete_value(doc: Document, path: str, prune: bool = False) -> bool:
    """
    Remove the value at *path*. Returns False if nothing was there.

    With *prune*, objects left empty by the removal are removed from their
    parents, walking up toward (but never including) the root.
    """
    keys = split_path(path)
    if not keys:
        return False
    *parents, last = keys

    # chain[i] is the container holding keys[i]
    chain: list[dict[str, Any]] = [doc]
    for key in parents:
        child = chain[-1].get(key, MISSING)
        if not is_map(child):
            return False
        chain.append(child)

    target = chain[-1]
    if last not in target:
        return False
    del target[last]

    if prune:
        for depth in range(len(parents) - 1, -1, -1):
            if chain[depth + 1]:
                break
            del chain[depth][parents[depth]]
    return True

from __future__ import annotations

import json
from typing import Any, Final

from pydantic import JsonValue

from .errors import DocumentValidationError

Document = dict[str, JsonValue]


class _Missing:
    """Marks an absent value; JSON ``null`` is a present value and is ``None``."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def is_map(value: Any) -> bool:
    return isinstance(value, dict)


def is_sequence(value: Any) -> bool:
    return isinstance(value, list)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_document(raw: str) -> Document:
    """
    Parse JSON text into a document.

    Raises DocumentValidationError when the text is not well-formed JSON
    (NaN and Infinity included) or when its root is anything other than
    an object.
    """
    if not raw.strip():
        raise DocumentValidationError("empty document")
    try:
        doc = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise DocumentValidationError(f"invalid JSON document: {e}") from e
    if not is_map(doc):
        raise DocumentValidationError(f"document root is {type(doc).__name__}, not an object")
    return doc

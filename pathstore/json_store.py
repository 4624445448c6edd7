from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from .errors import DocumentValidationError


def dumps(payload: Any, *, readable: bool = False) -> str:
    """
    Serialize a document. *readable* only changes whitespace.

    Output is strict JSON that encodes as UTF-8: NaN/Infinity and lone
    surrogates are rejected here, before any file is opened.
    """
    try:
        if readable:
            text = json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        text.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise DocumentValidationError(f"document is not JSON serializable: {e}") from e
    return text


def read_text(path: Path) -> str | None:
    """
    Read a file as UTF-8. Returns None if it does not exist.
    """
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    # encode first so a bad string never truncates the target
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise DocumentValidationError(f"document is not valid UTF-8: {e}") from e
    with path.open("wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())


def atomic_replace(src: Path, dst: Path) -> None:
    """
    Move *src* over *dst*; readers see either the old or the new file.
    """
    os.replace(src, dst)

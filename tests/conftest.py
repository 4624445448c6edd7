from __future__ import annotations

from pathlib import Path
import sys
import time
from typing import Any, Callable, Iterator


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """
    Folder for a store's files; each test gets its own so nothing touches ./database.
    """
    return tmp_path / "db"


@pytest.fixture
def make_store(store_dir: Path) -> Iterator[Callable[..., Any]]:
    """
    Factory for Store instances rooted in store_dir. Stores are closed after the test.
    """
    from pathstore import Store

    opened: list[Store] = []

    def _make(**options: Any) -> Store:
        options.setdefault("folder", store_dir)
        store = Store(**options)
        opened.append(store)
        return store

    yield _make

    for store in opened:
        store.close()


@pytest.fixture
def wait_for() -> Callable[..., bool]:
    """
    Poll a predicate until it holds or the timeout passes (for background backups).
    """

    def _wait(predicate: Callable[[], bool], timeout: float = 3.0, interval: float = 0.02) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval)
        return predicate()

    return _wait

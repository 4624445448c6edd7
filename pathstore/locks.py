from __future__ import annotations

import threading

from .paths import StoragePaths


class StorageLockRegistry:
    """
    One re-entrant lock per store location (resolved folder + file name).

    The lock covers the main, temp and backup files together, so a
    recovery during load() and the saves it triggers run as one unit.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[tuple[str, str], threading.RLock] = {}

    @staticmethod
    def key_for(paths: StoragePaths) -> tuple[str, str]:
        return str(paths.folder.resolve()), paths.file

    def lock_for(self, paths: StoragePaths) -> threading.RLock:
        key = self.key_for(paths)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


STORAGE_LOCKS = StorageLockRegistry()

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Mapping

from . import arrays
from .addressing import delete_value, get_value, set_value
from .backup import BackupScheduler, validate_backup_interval
from .disk_store import DiskDocumentPersistence
from .paths import StoragePaths
from .settings import StoreOptions, get_settings, validate_file_name
from .values import MISSING, Document

logger = logging.getLogger(__name__)


class Store:
    """
    A JSON document kept in memory and written through to disk after every
    mutation.

    Keys are dot-separated paths (``"user.settings.theme"``). The document
    lives in ``<folder>/<file>.json``, with ``<file>.backup.json`` refreshed
    on every save and on a background timer. Opening a store never fails
    because of a missing or corrupt file: it falls back to the backup, then
    to an empty document.

    A mutation that fails to persist is still applied in memory; the error
    is raised to the caller.
    """

    def __init__(self, options: StoreOptions | Mapping[str, Any] | None = None, **overrides: Any):
        self._options = StoreOptions.build(options, **overrides)
        self._lock = threading.RLock()
        self._closed = False
        self._persistence = self._open(self._options)
        self._data: Document = self._persistence.load()
        self._scheduler = BackupScheduler(self._scheduled_backup, self._options.backup_interval)
        self._scheduler.start()
        logger.info("Opened store at %s", self._persistence.paths.main)

    @classmethod
    def from_env(cls, dotenv_path: str | os.PathLike[str] | None = None, **overrides: Any) -> "Store":
        return cls(get_settings(dotenv_path), **overrides)

    @staticmethod
    def _open(options: StoreOptions) -> DiskDocumentPersistence:
        paths = StoragePaths(Path(options.folder), options.file).ensure()
        return DiskDocumentPersistence(paths, readable=options.readable)

    # -------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------
    @property
    def options(self) -> StoreOptions:
        return self._options

    @property
    def paths(self) -> StoragePaths:
        return self._persistence.paths

    @property
    def folder(self) -> Path:
        return self._persistence.paths.folder

    @property
    def file(self) -> str:
        return self._persistence.paths.file

    @property
    def readable(self) -> bool:
        return self._options.readable

    @property
    def no_blank_data(self) -> bool:
        return self._options.no_blank_data

    @property
    def check_updates(self) -> bool:
        return self._options.check_updates

    @property
    def backup_interval(self) -> float:
        return self._options.backup_interval

    @property
    def closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def get(self, path: str, default: Any = None) -> Any:
        with self._lock:
            value = get_value(self._data, path)
        return default if value is MISSING else value

    fetch = get

    def has(self, path: str) -> bool:
        with self._lock:
            return get_value(self._data, path) is not MISSING

    def all(self) -> Document:
        """The live document. Changes made to it are not saved until the next mutation."""
        return self._data

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def set(self, path: str, value: Any) -> Any:
        if not path:
            logger.warning("Ignoring set() with an empty path")
            return value
        with self._lock:
            set_value(self._data, path, value)
            self._save()
        return value

    def delete(self, path: str) -> bool:
        with self._lock:
            removed = delete_value(self._data, path, prune=self._options.no_blank_data)
            self._save()
        return removed

    def delete_all(self) -> bool:
        with self._lock:
            self._data = {}
            self._save()
        return True

    def push(self, path: str, value: Any) -> list[Any]:
        if not path:
            logger.warning("Ignoring push() with an empty path")
            return []
        with self._lock:
            items = arrays.push(self._data, path, value)
            self._save()
        return items

    def unpush(self, path: str, value: Any) -> list[Any]:
        if not path:
            logger.warning("Ignoring unpush() with an empty path")
            return []
        with self._lock:
            items = arrays.unpush(self._data, path, value)
            self._save()
        return items

    def set_by_priority(self, path: str, value: Any, priority: int) -> list[Any]:
        if not path:
            logger.warning("Ignoring set_by_priority() with an empty path")
            return []
        with self._lock:
            items = arrays.set_by_priority(self._data, path, value, priority)
            self._save()
        return items

    def del_by_priority(self, path: str, priority: int) -> list[Any]:
        with self._lock:
            items, removed = arrays.del_by_priority(self._data, path, priority)
            if removed:
                self._save()
        return items

    def create_backup(self) -> None:
        with self._lock:
            self._persistence.create_backup(self._data)

    def _save(self) -> None:
        self._persistence.save(self._data)

    # -------------------------------------------------------------------
    # Reconfiguration
    # -------------------------------------------------------------------
    def set_folder(self, folder: str | os.PathLike[str]) -> None:
        self._relocate(folder=Path(folder))

    def set_file(self, file: str) -> None:
        self._relocate(file=validate_file_name(file))

    def set_readable(self, readable: bool) -> None:
        with self._lock:
            self._options = self._options.model_copy(update={"readable": bool(readable)})
            self._persistence.readable = self._options.readable
            self._save()

    def set_no_blank_data(self, enabled: bool) -> None:
        with self._lock:
            self._options = self._options.model_copy(update={"no_blank_data": bool(enabled)})

    def set_check_updates(self, enabled: bool) -> None:
        with self._lock:
            self._options = self._options.model_copy(update={"check_updates": bool(enabled)})

    def set_backup_interval(self, minutes: float) -> None:
        interval = validate_backup_interval(minutes)
        if not self._closed:
            self._scheduler.restart(interval)
        with self._lock:
            self._options = self._options.model_copy(update={"backup_interval": interval})

    def _relocate(self, **changes: Any) -> None:
        options = StoreOptions.build(self._options, **changes)
        with self._lock:
            persistence = self._open(options)
            self._data = persistence.load()
            self._persistence, self._options = persistence, options
        logger.info("Store moved to %s", persistence.paths.main)

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def _scheduled_backup(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._persistence.create_backup(self._data)

    def close(self) -> None:
        """Stop the backup timer. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._scheduler.stop()
        logger.info("Closed store at %s", self._persistence.paths.main)

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Store({str(self._persistence.paths.main)!r})"

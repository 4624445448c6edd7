from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from . import json_store
from .errors import DocumentValidationError, StoreError
from .interfaces import DocumentPersistence
from .locks import STORAGE_LOCKS, StorageLockRegistry
from .paths import StoragePaths
from .values import Document, parse_document

logger = logging.getLogger(__name__)


class DiskDocumentPersistence(DocumentPersistence):
    """
    Stores a single JSON document as <file>.json with a <file>.backup.json
    recovery copy.

    - load() never raises: main file, then backup, then an empty document.
    - save() stages to <file>.temp.json, re-reads and validates it, then
      atomically replaces the main file. A staged file that does not read
      back as a valid document never replaces the main file.
    """

    def __init__(
        self,
        paths: StoragePaths,
        *,
        readable: bool = False,
        locks: StorageLockRegistry = STORAGE_LOCKS,
    ):
        self._paths = paths
        self.readable = readable
        self._lock = locks.lock_for(paths)

    @property
    def paths(self) -> StoragePaths:
        return self._paths

    @property
    def lock(self) -> "threading.RLock":
        return self._lock

    def load(self) -> Document:
        with self._lock:
            return self._load()

    def _load(self) -> Document:
        main = self._paths.main
        doc = self._read_valid(main)
        if doc is not None:
            self._write_back(self.create_backup, doc)
            return doc

        doc = self._read_valid(self._paths.backup)
        if doc is not None:
            logger.info("Restoring %s from backup %s", main, self._paths.backup)
            self._write_back(self.save, doc)
            return doc

        logger.info("Initializing empty document at %s", main)
        doc = {}
        self._write_back(self.save, doc)
        return doc

    def save(self, doc: Document) -> None:
        text = json_store.dumps(doc, readable=self.readable)
        temp = self._paths.temp
        with self._lock:
            json_store.write_text(temp, text)
            try:
                parse_document(json_store.read_text(temp) or "")
            except DocumentValidationError:
                temp.unlink(missing_ok=True)
                logger.error("Staged write %s did not validate; %s left unchanged", temp, self._paths.main)
                raise
            json_store.atomic_replace(temp, self._paths.main)
            json_store.write_text(self._paths.backup, text)
        logger.debug("Saved %s (%d bytes)", self._paths.main, len(text))

    def create_backup(self, doc: Document) -> None:
        text = json_store.dumps(doc, readable=self.readable)
        with self._lock:
            json_store.write_text(self._paths.backup, text)
        logger.debug("Wrote backup %s", self._paths.backup)

    def _read_valid(self, path: Path) -> Document | None:
        try:
            raw = json_store.read_text(path)
            if raw is None:
                return None
            return parse_document(raw)
        except (OSError, UnicodeDecodeError, DocumentValidationError) as e:
            logger.warning("Ignoring unreadable document %s: %s", path, e)
            return None

    def _write_back(self, write: Callable[[Document], None], doc: Document) -> None:
        # Loading must still hand back the recovered document if the disk refuses the write.
        try:
            write(doc)
        except (OSError, StoreError):
            logger.exception("Could not persist recovered document to %s", self._paths.folder)

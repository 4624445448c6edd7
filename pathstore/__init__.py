"""pathstore: a file-backed JSON document store addressed by dot paths."""

from __future__ import annotations

from .backup import BackupScheduler
from .disk_store import DiskDocumentPersistence
from .errors import (
    ConfigurationError,
    DocumentValidationError,
    InvalidPriorityError,
    StoreError,
    TypeMismatchError,
)
from .paths import StoragePaths
from .repositories import AsyncDocumentRepository, AsyncStore
from .settings import StoreOptions, get_settings
from .store import Store
from .values import MISSING, Document

__all__ = [
    "Store",
    "AsyncStore",
    "AsyncDocumentRepository",
    "StoreOptions",
    "get_settings",
    "DiskDocumentPersistence",
    "StoragePaths",
    "BackupScheduler",
    "Document",
    "MISSING",
    "StoreError",
    "DocumentValidationError",
    "TypeMismatchError",
    "InvalidPriorityError",
    "ConfigurationError",
]

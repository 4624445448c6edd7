from __future__ import annotations

from typing import Protocol

from .values import Document


class DocumentPersistence(Protocol):
    """
    Durable home for a single JSON document.
    """

    readable: bool

    def load(self) -> Document:
        """Load the document, recovering from backup; never raises."""
        ...

    def save(self, doc: Document) -> None:
        """Persist the document atomically and refresh the backup."""
        ...

    def create_backup(self, doc: Document) -> None:
        """Overwrite the backup copy with the document."""
        ...

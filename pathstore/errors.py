from __future__ import annotations


class StoreError(Exception):
    """Base class for every error raised by pathstore."""


class DocumentValidationError(StoreError, ValueError):
    """Bytes on disk (or about to be written) are not a JSON object document."""


class TypeMismatchError(StoreError, TypeError):
    """An array operation targeted a value that exists and is not a list."""


class InvalidPriorityError(StoreError, IndexError):
    """A 1-based priority falls outside what the target list can accept."""


class ConfigurationError(StoreError, ValueError):
    """Rejected store option (backup interval, file name, ...)."""

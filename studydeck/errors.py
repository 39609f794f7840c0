"""
Storage error types shared by every DbClient implementation.
"""

from __future__ import annotations


class StorageError(Exception):
    """Raised when a storage backend cannot complete an operation."""


class ConstraintViolationError(StorageError):
    """A uniqueness or integrity rule rejected the write."""


class ConnectivityError(StorageError):
    """The persistence target could not be reached."""

"""Exception types raised by the storage layer.

Every error derives from `KVStorageError` so callers persisting session
data can catch one type. Nothing here is retried internally; errors are
logged where they are wrapped and then propagated to the caller.
"""
from __future__ import annotations
from typing import Optional


class KVStorageError(Exception):
    """Base class for all storage errors."""


class CapabilityUnavailable(KVStorageError):
    """A requested persistence mechanism is not usable in this host."""

    def __init__(self, backend: str, reason: str = "") -> None:
        self.backend = backend
        self.reason = reason
        msg = f"storage backend {backend!r} is unavailable"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class QuotaExceededError(KVStorageError):
    """A backend refused a write because its quota would be exceeded."""

    # DOM-compatible markers so `is_quota_error` treats it like the browser one
    name = "QuotaExceededError"
    code = 22


class BackendWriteError(KVStorageError):
    def __init__(self, key: str, message: str = "") -> None:
        self.key = key
        super().__init__(message or f"failed to write key {key!r}")


class SerializationError(KVStorageError):
    def __init__(self, key: str, message: str = "") -> None:
        self.key = key
        super().__init__(message or f"value for key {key!r} is not JSON-representable")


class DeserializationError(KVStorageError):
    def __init__(self, key: str, raw: Optional[str] = None, message: str = "") -> None:
        self.key = key
        self.raw = raw
        super().__init__(message or f"stored value for key {key!r} is not valid JSON")


class BatchPartialFailure(KVStorageError):
    """An item of a batch operation failed, failing the whole batch.

    The failing item's exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, message: str = "") -> None:
        self.operation = operation
        super().__init__(message or f"batch {operation}() failed")

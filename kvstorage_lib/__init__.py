"""Persistent, namespaced key-value storage for protocol clients."""

from kvstorage_lib.bootstrap import create_storage, select_backend
from kvstorage_lib.config import StorageConfig, load_config
from kvstorage_lib.default import get_storage
from kvstorage_lib.errors import (
    BackendWriteError,
    BatchPartialFailure,
    CapabilityUnavailable,
    DeserializationError,
    KVStorageError,
    QuotaExceededError,
    SerializationError,
)
from kvstorage_lib.storage import KVStorage, ProbeResult, Storage, probe

__all__ = [
    "create_storage",
    "select_backend",
    "StorageConfig",
    "load_config",
    "get_storage",
    "KVStorage",
    "Storage",
    "ProbeResult",
    "probe",
    "KVStorageError",
    "CapabilityUnavailable",
    "QuotaExceededError",
    "BackendWriteError",
    "SerializationError",
    "DeserializationError",
    "BatchPartialFailure",
]

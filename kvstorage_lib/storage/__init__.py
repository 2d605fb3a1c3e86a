"""Storage abstraction package for kvstorage."""

from .base import StorageBackend
from .file_backend import FileStorageBackend
from .host_backend import HostStorageBackend
from .kv import Storage
from .memory_backend import MemoryStorage
from .namespaced import KVStorage
from .probe import ProbeResult, probe

__all__ = [
    "StorageBackend",
    "FileStorageBackend",
    "HostStorageBackend",
    "MemoryStorage",
    "Storage",
    "KVStorage",
    "ProbeResult",
    "probe",
]

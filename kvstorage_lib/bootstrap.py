"""Backend selection and Storage composition.

`create_storage` is the one place that decides where data lives. In
`auto` mode the order is: the host's Web Storage (browser-like hosts),
then a file-backed store (hosts with file I/O), then memory. Explicit
modes fail with `CapabilityUnavailable` instead of falling back.
"""
from __future__ import annotations
import logging
from typing import Optional

from kvstorage_lib.config import StorageConfig
from kvstorage_lib.errors import CapabilityUnavailable
from kvstorage_lib.storage.base import StorageBackend
from kvstorage_lib.storage.file_backend import FileStorageBackend
from kvstorage_lib.storage.host_backend import HostStorageBackend, detect_host_storage, is_browser_host
from kvstorage_lib.storage.interfaces import WebStorageProtocol
from kvstorage_lib.storage.kv import Storage
from kvstorage_lib.storage.memory_backend import MemoryStorage
from kvstorage_lib.storage.probe import ProbeResult, probe

logger = logging.getLogger(__name__)


def _host_backend(host_storage: Optional[WebStorageProtocol]) -> Optional[HostStorageBackend]:
    handle = host_storage if host_storage is not None else detect_host_storage()
    if handle is None:
        return None
    backend = HostStorageBackend(handle)
    result = probe(backend)
    if result is ProbeResult.QUOTA_EXCEEDED:
        logger.warning("Host storage is full; using it read-mostly, writes will fail")
    return backend if result.usable else None


def _file_backend(config: StorageConfig) -> Optional[FileStorageBackend]:
    try:
        backend = FileStorageBackend(config.data_dir, quota=config.quota)
    except OSError as exc:
        logger.warning("Cannot use %s for file storage: %s", config.data_dir, exc)
        return None
    result = probe(backend)
    if result is ProbeResult.QUOTA_EXCEEDED:
        logger.warning("File storage at %s is over quota; writes will fail", config.data_dir)
    return backend if result.usable else None


def select_backend(config: StorageConfig, host_storage: Optional[WebStorageProtocol] = None) -> StorageBackend:
    """Resolve the backend for `config`.

    Parameters
    - config: selection mode, data directory and quota.
    - host_storage: an explicit Web Storage object; when omitted the host
      is asked via `detect_host_storage()`.
    """
    mode = config.backend
    backend: Optional[StorageBackend]

    if mode == "host":
        backend = _host_backend(host_storage)
        if backend is None:
            raise CapabilityUnavailable("host", "no usable Web Storage in this host")
    elif mode == "file":
        backend = _file_backend(config)
        if backend is None:
            raise CapabilityUnavailable("file", f"cannot write to {config.data_dir}")
    elif mode == "memory":
        backend = MemoryStorage()
    else:
        backend = _host_backend(host_storage)
        if backend is None and host_storage is None and not is_browser_host():
            backend = _file_backend(config)
        if backend is None:
            logger.warning("No persistent storage available; falling back to memory")
            backend = MemoryStorage()

    logger.info("Selected %s storage backend (mode=%s)", backend.kind, mode)
    return backend


def create_storage(config: Optional[StorageConfig] = None,
                   host_storage: Optional[WebStorageProtocol] = None) -> Storage:
    """Create a Storage for `config` (defaults when omitted)."""
    return Storage(select_backend(config or StorageConfig(), host_storage))

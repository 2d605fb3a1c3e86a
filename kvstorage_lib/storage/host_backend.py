"""Backend adapter for a host-provided Web Storage object.

In a browser-like interpreter (Pyodide, where `sys.platform` is
"emscripten") the host exposes `localStorage` through the `js` module.
`HostStorageBackend` forwards every call to that object; the host decides
persistence, enumeration order and quota.
"""
from __future__ import annotations
import logging
import sys
from threading import RLock
from typing import Any, List, Optional

from .base import StorageBackend
from .interfaces import WebStorageProtocol

logger = logging.getLogger(__name__)


def is_browser_host() -> bool:
    return sys.platform == "emscripten"


def detect_host_storage(name: str = "localStorage", host: Any = None) -> Optional[WebStorageProtocol]:
    """Return the host's Web Storage object, or None outside a browser host.

    `host` is the object exposing the storage attribute; by default the
    Pyodide `js` bridge module, consulted only in a browser host.
    Accessing `localStorage` itself can raise in a browser (e.g. storage
    disabled by policy); that is reported as None as well.
    """
    if host is None:
        if not is_browser_host():
            return None
        import js as host  # type: ignore[import-not-found,no-redef]  # provided by Pyodide
    try:
        handle = getattr(host, name)
    except Exception as exc:
        logger.info("Host storage %s not accessible: %s", name, exc)
        return None
    if not isinstance(handle, WebStorageProtocol):
        logger.info("Host object %s does not look like Web Storage", name)
        return None
    return handle


class HostStorageBackend(StorageBackend):
    kind = "host"

    def __init__(self, handle: WebStorageProtocol) -> None:
        self.handle = handle
        self._lock = RLock()

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self.handle.setItem(key, value)

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self.handle.getItem(key)

    def remove_item(self, key: str) -> None:
        with self._lock:
            self.handle.removeItem(key)

    def clear(self) -> None:
        with self._lock:
            self.handle.clear()

    def key(self, index: int) -> Optional[str]:
        if index < 0:
            return None
        with self._lock:
            return self.handle.key(index)

    def keys(self) -> List[str]:
        with self._lock:
            found = (self.handle.key(i) for i in range(self.handle.length))
            return [k for k in found if k is not None]

    def __len__(self) -> int:
        with self._lock:
            return int(self.handle.length)

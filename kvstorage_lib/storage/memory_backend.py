"""Simple memory-backed storage backend

This backend keeps entries in a plain dict `{<key>: <text>}` and is the
fallback when no persistent mechanism is usable. Enumeration follows
insertion order.
"""
from threading import RLock
from typing import Dict, List, Optional

from kvstorage_lib.errors import QuotaExceededError

from .base import StorageBackend


class MemoryStorage(StorageBackend):
    kind = "memory"

    def __init__(self, quota: Optional[int] = None):
        self._lock = RLock()
        self._store: Dict[str, str] = {}
        self.quota = quota

    def _size_with(self, key: str, value: str) -> int:
        # UTF-8 bytes of keys plus values
        size = sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in self._store.items() if k != key)
        return size + len(key.encode("utf-8")) + len(value.encode("utf-8"))

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            if self.quota is not None and self._size_with(key, value) > self.quota:
                raise QuotaExceededError(f"memory quota of {self.quota} exceeded writing {key!r}")
            self._store[key] = value

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._store.get(key)

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._store.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

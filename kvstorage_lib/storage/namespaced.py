"""Namespaced view over a `Storage`.

A `KVStorage` prepends a fixed prefix to every caller key so independent
logical stores (sessions, auth keys, ...) can share one backend. Keys
handed back to the caller are always the caller's own, unprefixed keys.
`clear()` is not namespaced: it wipes the whole backend.
"""
from __future__ import annotations
from typing import Any, List, Mapping

from .kv import Storage


class KVStorage:
    def __init__(self, storage: Storage, prefix: str = "") -> None:
        self._storage = storage
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def length(self) -> int:
        """Entry count of the whole backend, not only this namespace."""
        return self._storage.length

    @property
    def scoped_length(self) -> int:
        """Number of backend keys that start with this view's prefix."""
        return sum(1 for k in self._storage.backend.keys() if k.startswith(self._prefix))

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"KVStorage(prefix={self._prefix!r}, storage={self._storage!r})"

    def _key(self, key: str) -> str:
        return self._prefix + key

    async def scoped_keys(self) -> List[str]:
        """Caller keys stored under this prefix, in backend order."""
        n = len(self._prefix)
        return [k[n:] for k in self._storage.backend.keys() if k.startswith(self._prefix)]

    async def set_item(self, key: str, value: Any) -> Any:
        return await self._storage.set_item(self._key(key), value)

    async def set(self, items: Mapping[str, Any]) -> List[Any]:
        return await self._storage.set({self._key(k): v for k, v in items.items()})

    async def get_item(self, key: str) -> Any:
        return await self._storage.get_item(self._key(key))

    async def get(self, *keys: str) -> List[Any]:
        return await self._storage.get(*(self._key(k) for k in keys))

    async def remove_item(self, key: str) -> str:
        await self._storage.remove_item(self._key(key))
        return key

    async def remove(self, *keys: str) -> List[str]:
        await self._storage.remove(*(self._key(k) for k in keys))
        return list(keys)

    async def clear(self) -> None:
        await self._storage.clear()

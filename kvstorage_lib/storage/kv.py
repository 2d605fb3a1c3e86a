"""Asynchronous key-value operations over a single storage backend.

`Storage` is the object consumers receive (see `kvstorage_lib.bootstrap.
create_storage`). Values are JSON-encoded on the way in and decoded on the
way out. Every operation is a coroutine even though backends are
synchronous, so callers see one interface whatever the backend is.

Batch operations (`get`, `set`, `remove`, `keys`) run the singular
operation for each item concurrently and fail fast: the first failing item
fails the batch with `BatchPartialFailure`.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Any, Awaitable, List, Mapping, Optional, TYPE_CHECKING

from kvstorage_lib.errors import (
    BackendWriteError,
    BatchPartialFailure,
    DeserializationError,
    SerializationError,
)

from .base import StorageBackend
from .serializer import JSONSerializer, Serializer

if TYPE_CHECKING:
    from .namespaced import KVStorage

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, backend: StorageBackend, serializer: Optional[Serializer] = None) -> None:
        self.backend = backend
        self.serializer = serializer or JSONSerializer()

    @property
    def kind(self) -> str:
        return self.backend.kind

    @property
    def length(self) -> int:
        """Number of entries in the backend, across all namespaces."""
        return len(self.backend)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"Storage(backend={self.backend!r})"

    def view(self, prefix: str = "") -> "KVStorage":
        from .namespaced import KVStorage
        return KVStorage(self, prefix)

    async def set_item(self, key: str, value: Any) -> Any:
        try:
            text = self.serializer.dump(value)
        except (TypeError, ValueError) as exc:
            raise SerializationError(key, f"cannot serialize value for {key!r}: {exc}") from exc
        try:
            self.backend.set_item(key, text)
        except Exception as exc:
            logger.warning("Write of %r to %s storage failed: %s", key, self.kind, exc)
            raise BackendWriteError(key, f"write of {key!r} rejected by {self.kind} storage: {exc}") from exc
        return value

    async def get_item(self, key: str) -> Any:
        try:
            raw = self.backend.get_item(key)
        except UnicodeDecodeError as exc:
            logger.error("Stored value for %r is not valid UTF-8", key)
            raise DeserializationError(key, None, f"stored value for key {key!r} is not valid UTF-8") from exc
        if not raw:
            return None
        try:
            return self.serializer.load(raw)
        except ValueError as exc:
            logger.error("Stored value for %r is not valid JSON", key)
            raise DeserializationError(key, raw) from exc

    async def remove_item(self, key: str) -> str:
        self.backend.remove_item(key)
        return key

    async def clear(self) -> None:
        self.backend.clear()
        logger.debug("Cleared %s storage", self.kind)

    async def key(self, index: int) -> Optional[str]:
        return self.backend.key(index)

    async def keys(self, *indices: int) -> List[Optional[str]]:
        return await _gather("keys", [self.key(i) for i in indices])

    async def get(self, *keys: str) -> List[Any]:
        return await _gather("get", [self.get_item(k) for k in keys])

    async def set(self, items: Mapping[str, Any]) -> List[Any]:
        return await _gather("set", [self.set_item(k, v) for k, v in items.items()])

    async def remove(self, *keys: str) -> List[str]:
        return await _gather("remove", [self.remove_item(k) for k in keys])


async def _gather(operation: str, aws: List[Awaitable[Any]]) -> List[Any]:
    try:
        return list(await asyncio.gather(*aws))
    except Exception as exc:
        raise BatchPartialFailure(operation, f"batch {operation}() failed: {exc}") from exc

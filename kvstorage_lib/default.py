"""Process-wide default storage and module-level shortcuts.

Consumers should prefer an explicit `Storage` from `create_storage()`.
For callers that want the classic free-function interface, this module
resolves one `Storage` lazily on first use (configured by `load_config()`)
and keeps it for the life of the process; there is no reset.
"""
from __future__ import annotations
import logging
import threading
from typing import Any, List, Mapping, Optional

from kvstorage_lib.bootstrap import create_storage
from kvstorage_lib.config import load_config
from kvstorage_lib.storage.kv import Storage
from kvstorage_lib.storage.namespaced import KVStorage

logger = logging.getLogger(__name__)

_default_storage: list[Storage] = []
_init_lock = threading.Lock()


def default_storage() -> Storage:
    """Return the process default Storage, creating it on first call."""
    if _default_storage:
        return _default_storage[0]
    with _init_lock:
        if not _default_storage:
            _default_storage.append(create_storage(load_config()))
            logger.debug("Initialized default %s storage", _default_storage[0].kind)
    return _default_storage[0]


def get_storage(prefix: str = "") -> KVStorage:
    return KVStorage(default_storage(), prefix)


async def set_item(key: str, value: Any) -> Any:
    return await default_storage().set_item(key, value)


async def get_item(key: str) -> Any:
    return await default_storage().get_item(key)


async def remove_item(key: str) -> str:
    return await default_storage().remove_item(key)


async def clear() -> None:
    await default_storage().clear()


async def key(index: int) -> Optional[str]:
    return await default_storage().key(index)


async def keys(*indices: int) -> List[Optional[str]]:
    return await default_storage().keys(*indices)


async def get(*keys: str) -> List[Any]:
    return await default_storage().get(*keys)


async def set(items: Mapping[str, Any]) -> List[Any]:
    return await default_storage().set(items)


async def remove(*keys: str) -> List[str]:
    return await default_storage().remove(*keys)

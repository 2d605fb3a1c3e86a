"""Capability probe for persistent key-value stores.

`probe` tries a write-then-delete of a sentinel key and reports a
`ProbeResult` instead of raising, so the backend selector can decide on a
fallback without inspecting exceptions itself.
"""
from __future__ import annotations
import enum
import logging
from typing import Optional

from .base import StorageBackend

logger = logging.getLogger(__name__)

SENTINEL_KEY = "__storage_test__"

# DOMException signals for a full store: 22 / QuotaExceededError everywhere
# except Firefox, which uses 1014 / NS_ERROR_DOM_QUOTA_REACHED.
QUOTA_CODES = frozenset({22, 1014})
QUOTA_NAMES = frozenset({"QuotaExceededError", "NS_ERROR_DOM_QUOTA_REACHED"})


class ProbeResult(enum.Enum):
    AVAILABLE = "available"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNAVAILABLE = "unavailable"

    @property
    def usable(self) -> bool:
        """True when existing entries can be read from the store."""
        return self is not ProbeResult.UNAVAILABLE


def is_quota_error(exc: BaseException) -> bool:
    """Return True if `exc` signals a storage-full condition."""
    code = getattr(exc, "code", None)
    name = getattr(exc, "name", None)
    return code in QUOTA_CODES or name in QUOTA_NAMES


def _entry_count(store: StorageBackend) -> int:
    try:
        return len(store)
    except Exception:
        logger.debug("Could not count entries while probing %r", store, exc_info=True)
        return 0


def probe(store: Optional[StorageBackend]) -> ProbeResult:
    """Check whether `store` accepts writes.

    A quota failure on a store that already holds entries is a soft
    negative (`QUOTA_EXCEEDED`): the data is there but new writes fail. A
    quota failure on an empty store, or any other failure, means
    `UNAVAILABLE`.
    """
    if store is None:
        return ProbeResult.UNAVAILABLE
    try:
        store.set_item(SENTINEL_KEY, SENTINEL_KEY)
    except Exception as exc:
        if is_quota_error(exc) and _entry_count(store) != 0:
            logger.warning("Storage %r is full; existing entries stay readable", store)
            return ProbeResult.QUOTA_EXCEEDED
        logger.info("Storage %r failed capability probe: %s", store, exc)
        return ProbeResult.UNAVAILABLE
    try:
        store.remove_item(SENTINEL_KEY)
    except Exception:
        logger.debug("Could not remove probe sentinel from %r", store, exc_info=True)
    return ProbeResult.AVAILABLE

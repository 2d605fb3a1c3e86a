"""Storage backend interface definitions.

Defines the StorageBackend abstract class every persistence mechanism
(host Web Storage, files, memory) implements. Backends only deal with
text values; JSON encoding happens one layer up in `Storage`.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional


class StorageBackend(ABC):
    """Abstract synchronous key-value backend.

    Implementations must be thread-safe if used concurrently. Every method
    may raise on I/O or quota errors.
    """

    #: short name used in logs and configuration
    kind: str = "abstract"

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store `value` under `key`, overwriting any previous value."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the text stored under `key`, or None when absent."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete `key`. Deleting a missing key is a no-op."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every entry."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Return all keys in the backend's enumeration order."""

    def key(self, index: int) -> Optional[str]:
        """Return the key at `index`, or None when out of range."""
        if index < 0:
            return None
        keys = self.keys()
        return keys[index] if index < len(keys) else None

    def __len__(self) -> int:
        return len(self.keys())

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"<{type(self).__name__} kind={self.kind}>"

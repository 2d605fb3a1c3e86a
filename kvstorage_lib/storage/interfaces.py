from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class WebStorageProtocol(Protocol):
    """Shape of a host-provided Web Storage object (e.g. `localStorage`).

    Mirrors the DOM Storage interface, so a Pyodide `js.localStorage`
    proxy satisfies it. All calls are synchronous and any of them may
    raise on quota or I/O errors. `HostStorageBackend` adapts it to
    `kvstorage_lib.storage.base.StorageBackend`.
    """

    length: int

    def setItem(self, key: str, value: str) -> None: ...

    def getItem(self, key: str) -> Optional[str]: ...

    def removeItem(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def key(self, index: int) -> Optional[str]: ...

from typing import Dict, List, Optional


class FakeDOMException(Exception):
    """Stand-in for a JS DOMException as surfaced by the host bridge."""

    def __init__(self, name: str, code: int = 0) -> None:
        super().__init__(name)
        self.name = name
        self.code = code


class FakeWebStorage:
    """Dict-backed object with the DOM Storage surface.

    `fail_writes` makes `setItem` raise the given exception; `fail_removes`
    does the same for `removeItem`.
    """

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})
        self.fail_writes: Optional[Exception] = None
        self.fail_removes: Optional[Exception] = None
        self.calls: List[str] = []

    @property
    def length(self) -> int:
        return len(self.data)

    def setItem(self, key: str, value: str) -> None:
        self.calls.append(f"setItem:{key}")
        if self.fail_writes is not None:
            raise self.fail_writes
        self.data[key] = value

    def getItem(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def removeItem(self, key: str) -> None:
        self.calls.append(f"removeItem:{key}")
        if self.fail_removes is not None:
            raise self.fail_removes
        self.data.pop(key, None)

    def clear(self) -> None:
        self.data.clear()

    def key(self, index: int) -> Optional[str]:
        keys = list(self.data)
        return keys[index] if 0 <= index < len(keys) else None

from typing import Any, Protocol
import json


class Serializer(Protocol):
    """Serialize/deserialize Python values to the text stored by backends.

    Implementations should be symmetric: `dump` -> str, `load` <- str.
    """

    def dump(self, value: Any) -> str: ...

    def load(self, data: str) -> Any: ...


class JSONSerializer:
    """Serializer using compact JSON text.

    Output matches JavaScript's `JSON.stringify` so entries written by a
    browser client stay readable. NaN and infinities are rejected since
    they have no JSON representation.
    """

    def dump(self, value: Any) -> str:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)

    def load(self, data: str) -> Any:
        return json.loads(data)

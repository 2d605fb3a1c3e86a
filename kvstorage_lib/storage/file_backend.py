"""Simple file-backed storage backend.

This backend stores each entry as a UTF-8 text file under
`<data_dir>/<quoted key>`, where the file name is the key percent-encoded
with `urllib.parse.quote(key, safe="")`. It provides atomic writes by
writing to a temporary file then renaming, and enforces an optional quota
on the total size of the stored entries: for each entry, the length of
its encoded file name plus the UTF-8 byte size of its value.

Files in `data_dir` whose names are not the quoted form of some key are
not entries: they are never listed, counted or deleted. Quota usage is
measured on disk at every write, so several backends over the same
directory share one quota.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from threading import RLock
from typing import List, Optional
from urllib.parse import quote, unquote

from kvstorage_lib.errors import QuotaExceededError

from .base import StorageBackend

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "./kvstorage-data"
DEFAULT_QUOTA = 5 * 1024 * 1024
# Quoted keys only ever contain '%' followed by two hex digits, so no key
# file can start with this marker.
TMP_PREFIX = "%tmp-"


def is_entry_name(name: str) -> bool:
    """True if `name` is exactly the file name `quote` gives some key."""
    return not name.startswith(TMP_PREFIX) and quote(unquote(name), safe="") == name


def entry_size(key: str, value: str) -> int:
    return len(quote(key, safe="")) + len(value.encode("utf-8"))


class FileStorageBackend(StorageBackend):
    kind = "file"

    def __init__(self, data_dir: str | Path = DEFAULT_DATA_DIR, quota: Optional[int] = DEFAULT_QUOTA) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.quota = quota
        self._lock = RLock()
        logger.debug("FileStorageBackend at %s holds %d entries", self.data_dir, len(self))

    def _path_for(self, key: str) -> Path:
        return self.data_dir / quote(key, safe="")

    def _entry_paths(self) -> List[Path]:
        return [p for p in self.data_dir.iterdir() if p.is_file() and is_entry_name(p.name)]

    def bytes_in_use(self, exclude: Optional[str] = None) -> int:
        """Quota usage on disk, optionally leaving out the entry for `exclude`."""
        skip = quote(exclude, safe="") if exclude is not None else None
        total = 0
        with self._lock:
            for p in self._entry_paths():
                if p.name == skip:
                    continue
                try:
                    total += len(p.name) + p.stat().st_size
                except FileNotFoundError:
                    # removed by another writer since the listing
                    continue
        return total

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        with self._lock:
            if self.quota is not None:
                projected = self.bytes_in_use(exclude=key) + entry_size(key, value)
                if projected > self.quota:
                    raise QuotaExceededError(f"file quota of {self.quota} exceeded writing {key!r}")
            tmp = path.with_name(TMP_PREFIX + path.name)
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(path)

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored text; raises UnicodeDecodeError for non-UTF-8 files."""
        path = self._path_for(key)
        with self._lock:
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._path_for(key).unlink(missing_ok=True)

    def clear(self) -> None:
        with self._lock:
            for p in self.data_dir.iterdir():
                if p.is_file() and (is_entry_name(p.name) or p.name.startswith(TMP_PREFIX)):
                    p.unlink()

    def keys(self) -> List[str]:
        with self._lock:
            names = [p.name for p in self._entry_paths()]
        return sorted(unquote(n) for n in names)

"""Configuration for storage selection.

Settings come from an optional YAML file and are overridden by
environment variables:

    KVSTORAGE_BACKEND    auto | host | file | memory
    KVSTORAGE_DATA_DIR   directory of the file backend
    KVSTORAGE_QUOTA      file backend quota in bytes; none/0 disables
    KVSTORAGE_LOG_LEVEL  level used by `configure_logging`

The same quota rules apply to the YAML `quota` entry.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, field_validator

from kvstorage_lib.storage.file_backend import DEFAULT_DATA_DIR, DEFAULT_QUOTA

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("kvstorage.yml")

ENV_OVERRIDES = {
    "KVSTORAGE_BACKEND": "backend",
    "KVSTORAGE_DATA_DIR": "data_dir",
    "KVSTORAGE_QUOTA": "quota",
    "KVSTORAGE_LOG_LEVEL": "log_level",
}


class StorageConfig(BaseModel):
    backend: Literal["auto", "host", "file", "memory"] = "auto"
    data_dir: str = DEFAULT_DATA_DIR
    quota: Optional[int] = DEFAULT_QUOTA
    log_level: Optional[str] = None

    @field_validator("backend", mode="before")
    @classmethod
    def _lower_backend(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("quota", mode="before")
    @classmethod
    def _normalize_quota(cls, value: Any) -> Optional[int]:
        """None, empty, "none" and 0 all disable the quota."""
        if value is None:
            return None
        if isinstance(value, str):
            value = value.strip().lower()
            if value in ("", "none"):
                return None
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"quota must be an integer, got {value!r}")
        if value < 0:
            raise ValueError("quota must not be negative")
        return value or None


def load_config(path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> StorageConfig:
    """Build a StorageConfig from YAML (if present) plus environment overrides.

    A missing file yields defaults. A file that is not a YAML mapping is
    an error, as are invalid values (pydantic `ValidationError`).
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{cfg_path} must contain a YAML mapping")
        data.update(loaded)
        logger.debug("Loaded storage config from %s", cfg_path)

    for var, field in ENV_OVERRIDES.items():
        if var in env:
            data[field] = env[var]

    return StorageConfig(**data)

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from kvstorage_lib.config import load_config


def configure_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for an application embedding the storage layer.

    The level is taken from `level` when given, otherwise from
    `load_config(config_path).log_level` (YAML `log_level`, overridden by
    `KVSTORAGE_LOG_LEVEL`), otherwise WARNING. The library itself never
    calls this on import; the host application does. Returns a module
    logger for the caller.
    """
    DEFAULT_LOG_LEVEL = logging.WARNING

    if level is None:
        try:
            level = load_config(config_path).log_level
        except (OSError, ValueError, ValidationError, yaml.YAMLError):
            # If config parse fails, fall back to default level
            level = None

    if level:
        DEFAULT_LOG_LEVEL = getattr(logging, str(level).upper(), logging.WARNING)

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.info("[kvstorage]: Log level set to: %s", logging.getLevelName(DEFAULT_LOG_LEVEL))

    return logger

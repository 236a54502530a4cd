# -*- coding: utf-8 -*-
"""Logging helpers."""
import logging
import os
from typing import Optional

from puzzlesmith.common.constants import LOG_LEVEL_ENV_VAR

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "puzzlesmith"

_configured = False


def _configure_root() -> logging.Logger:
    global _configured
    root = logging.getLogger(_ROOT_NAME)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper())
        _configured = True
    return root


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package root logger.

    Args:
        name (`str`): Logger name, usually `__name__`. Names outside the package
            are nested under it.
        level (`str`): Optional level for this logger only.

    Returns:
        `logging.Logger`: The logger.
    """
    _configure_root()
    if not name or name == _ROOT_NAME:
        logger = logging.getLogger(_ROOT_NAME)
    elif name.startswith(_ROOT_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{_ROOT_NAME}.{name}")
    if level is not None:
        logger.setLevel(level.upper())
    return logger


def set_log_level(level: str) -> None:
    """Set the level of the package root logger."""
    _configure_root().setLevel(level.upper())

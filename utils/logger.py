"""
utils/logger.py
---------------
Logging setup for the catalog.
Modules obtain loggers through `get_logger(__name__)`. A single stdout
handler is attached to the root logger on first use. Both the root logger
and that handler follow LOG_LEVEL, and `set_level` moves them together at
runtime (gateways emit their SQL at DEBUG).
"""

import logging
import sys
from typing import Optional, Union

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: Optional[logging.Handler] = None


def _resolve(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _init_logging() -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        logging.getLogger().addHandler(_handler)
        set_level(LOG_LEVEL)
    return _handler


def set_level(level: Union[str, int]) -> int:
    """
    Apply `level` to the root logger and the catalog handler.

    Args:
        level: A level name such as "DEBUG" or a logging constant.
            Unknown names fall back to INFO.

    Returns:
        The numeric level now in effect.
    """
    numeric = _resolve(level)
    logging.getLogger().setLevel(numeric)
    if _handler is not None:
        _handler.setLevel(numeric)
    return numeric


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _init_logging()
    return logging.getLogger(name)

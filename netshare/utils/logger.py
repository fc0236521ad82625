"""Logging helpers"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_ROOT_LOGGER = 'netshare'


def get_logger(name: str) -> logging.Logger:
    """Get a module logger"""
    return logging.getLogger(name)


def setup_logging(level: str = 'INFO', fmt: Optional[str] = None,
                  json_format: bool = False, stream=None) -> logging.Logger:
    """
    Configure the netshare logger hierarchy.

    Args:
        level: Log level name
        fmt: Log record format (used for both plain and JSON output)
        json_format: Emit one JSON object per record
        stream: Output stream (default: stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter(fmt or DEFAULT_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
    return logger

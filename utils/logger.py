"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.

Records go to stdout, or to LOG_FILE when one is configured; format and
level come from LOG_FORMAT and LOG_LEVEL.
"""

import logging
import sys

from config import LOG_FILE, LOG_FORMAT, LOG_LEVEL

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def build_handler(log_file: str = LOG_FILE, fmt: str = LOG_FORMAT) -> logging.Handler:
    """
    Create the handler records are written to.

    Args:
        log_file: Path to append to; empty means stdout.
        fmt: `logging.Formatter` format string.
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, _DATE_FORMAT))
    return handler


def _init_logging() -> None:
    """Configure the root logger once."""
    global _initialized
    if _initialized:
        return
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(build_handler())
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, configuring the root logger on first use."""
    _init_logging()
    return logging.getLogger(name)

"""Logging configuration."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Args:
        level: Level name such as "DEBUG" or "INFO". Defaults to INFO.
        format_str: Log record format. Defaults to LOG_FORMAT.
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=format_str or LOG_FORMAT,
        handlers=[logging.StreamHandler()],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, usually called with ``__name__``."""
    return logging.getLogger(name)

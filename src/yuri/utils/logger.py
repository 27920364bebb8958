"""Minimal logging utilities for Yuri.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from yuri.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "yuri." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'yuri.mymodule'
    """
    if not (name == "yuri" or name.startswith("yuri.")):
        name = f"yuri.{name}"
    return logging.getLogger(name)

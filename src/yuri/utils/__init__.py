"""Utility modules for Yuri.

Provides:
- logger: get_logger for logging
"""

from yuri.utils.logger import get_logger

__all__ = [
    "get_logger",
]

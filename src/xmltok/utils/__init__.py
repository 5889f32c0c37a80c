"""Utility modules for xmltok.

Provides:
- logger: get_logger for logging
"""

from xmltok.utils.logger import get_logger

__all__ = [
    "get_logger",
]

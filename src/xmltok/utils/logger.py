"""Minimal logging utilities for xmltok.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from xmltok.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "xmltok." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'xmltok.mymodule'
    """
    # Ensure xmltok prefix for consistent namespacing
    if not (name == "xmltok" or name.startswith("xmltok.")):
        name = f"xmltok.{name}"
    return logging.getLogger(name)

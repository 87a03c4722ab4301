"""Minimal logging utilities for Notedown.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configuring output is left to the caller.

Example:
    >>> from notedown.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanned %d blocks", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "notedown." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'notedown.mymodule'
    """
    if not (name == "notedown" or name.startswith("notedown.")):
        name = f"notedown.{name}"
    return logging.getLogger(name)

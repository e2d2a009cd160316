"""Minimal logging utilities for prepis.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configuring output is the caller's job.

Example:
    >>> from prepis.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Validating segment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "prepis." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'prepis.mymodule'
    """
    if not (name == "prepis" or name.startswith("prepis.")):
        name = f"prepis.{name}"
    return logging.getLogger(name)

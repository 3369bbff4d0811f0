"""Minimal logging utilities for mathedit.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from mathedit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("cursor moved")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mathedit." prefix. The
    library never installs handlers; configure them in the host application.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("keys")
        >>> logger.name
        'mathedit.keys'
    """
    if not (name == "mathedit" or name.startswith("mathedit.")):
        name = f"mathedit.{name}"
    return logging.getLogger(name)

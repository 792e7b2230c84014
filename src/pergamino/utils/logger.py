"""Minimal logging utilities for Pergamino.

Example:
    >>> from pergamino.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pergamino." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pergamino.mymodule'
    """
    if not (name == "pergamino" or name.startswith("pergamino.")):
        name = f"pergamino.{name}"
    return logging.getLogger(name)

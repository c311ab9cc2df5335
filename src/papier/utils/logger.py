"""Logging helper for Papier.

Example:
    >>> from papier.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("opened sub-document at %s", loc)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``papier.``.

    Example:
        >>> get_logger("mymodule").name
        'papier.mymodule'
    """
    if not (name == "papier" or name.startswith("papier.")):
        name = f"papier.{name}"
    return logging.getLogger(name)

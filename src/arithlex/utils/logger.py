"""Logging helper for arithlex.

Example:
    >>> from arithlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("line %d rejected", 3)
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "arithlex"


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under "arithlex.".

    Example:
        >>> get_logger("loader").name
        'arithlex.loader'
    """
    if not (name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + ".")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)

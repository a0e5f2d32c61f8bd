"""Logging helpers for texttyper.

Wraps the standard library logging so every module logs under the
"texttyper." namespace. Hosts attach handlers to that logger to see
markup warnings without touching the root logger.

Example:
    >>> from texttyper.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("delay tag has no parameter")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "texttyper"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance under the texttyper namespace

    Example:
        >>> get_logger("host.dialogue").name
        'texttyper.host.dialogue'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

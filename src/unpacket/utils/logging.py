"""Logging setup for unpacket.

The library itself only emits debug records through module loggers under the
``unpacket`` namespace; applications decide where they go.
"""

from __future__ import annotations

import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(
    level: int = logging.INFO,
    *,
    name: str = "unpacket",
    propagate: bool = False,
) -> Logger:
    """Attach a formatted stderr handler to the unpacket logger.

    Calling this more than once adjusts the level but does not stack handlers.

    Args:
        level: Logging verbosity
        name: Logger namespace to configure
        propagate: Whether records also reach the root logger

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    if not any(isinstance(existing, logging.StreamHandler) for existing in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = propagate
    return logger

from __future__ import annotations

import logging
import os

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

logger = logging.getLogger(__package__)


def set_level(level: str | int) -> int:
    """Set the level of the package logger, unknown names fall back to INFO."""
    resolved = level if isinstance(level, int) else LOG_LEVELS.get(level.upper(), logging.INFO)
    logger.setLevel(resolved)
    return resolved


if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    set_level(os.environ.get("RETRY_ALGEBRA_LOG_LEVEL", "INFO"))
    logger.propagate = False

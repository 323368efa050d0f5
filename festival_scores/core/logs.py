"""Logging setup shared by the application entry points."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(name: str | None = "festival_scores", level: int = LOG_LEVEL) -> logging.Logger:
    """
    Configure and return the package logger with consistent formatting.

    Args:
        name: Logger name (the package root by default so every module's
            ``logging.getLogger(__name__)`` inherits the handler)
        level: Logging level (default: ``LOG_LEVEL`` from the environment)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


__all__ = ["setup_logging"]

"""Console logging for the plugin and CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Route ``safe_crystals`` loggers through a rich console handler."""
    logger = logging.getLogger("safe_crystals")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    return logger

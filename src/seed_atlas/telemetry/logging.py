"""Logger wiring for the seed-atlas package and its CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

ROOT_LOGGER = "seed_atlas"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single rich console handler to the package logger.

    Calling this again only updates the level, so repeated CLI invocations in one
    process do not stack handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    return logger

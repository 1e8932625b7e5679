"""Routes ``athena.*`` loggers to a rich console handler."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single rich handler to the ``athena`` logger tree."""
    logger = logging.getLogger("athena")
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger

"""Logging configuration for the filesig CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "filesig-rich"


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> None:
    """Attach a Rich handler to the `filesig` logger at the requested level.

    Calling this repeatedly replaces the level without stacking handlers.

    Args:
        level: Logging level name or number.
        console: Console to render through; defaults to stderr.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved

    logger = logging.getLogger("filesig")
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    logger.addHandler(handler)


__all__ = ["configure_logging"]

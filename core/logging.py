"""Logging setup shared by the CLI and the library modules."""

import logging
import os
from typing import Optional

from rich.logging import RichHandler


def configure_logging(level: Optional[str] = None, console=None) -> None:
    """
    Route stdlib logging through rich so log lines share the CLI console.

    The level comes from the argument, then ``LOG_LEVEL``, then WARNING.
    """
    resolved_level = (level or os.getenv('LOG_LEVEL', 'WARNING')).upper()
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    logging.basicConfig(
        level=resolved_level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

"""Logging setup for the tessel command line."""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: Union[int, str] = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """Route the ``tessel`` logger through a rich handler at ``level``."""
    logger = logging.getLogger("tessel")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True), show_path=False, markup=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
    return logger

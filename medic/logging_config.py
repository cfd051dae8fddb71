"""
Logging setup for medic.

The library only creates module loggers; handlers are installed by the
command-line entry points.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "medic"


def configure_logging(debug: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Install a rich handler on the medic logger.

    Args:
        debug: Log at DEBUG instead of WARNING
        console: Console to log to (stderr by default)

    Returns:
        The medic logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=debug,
        show_path=False,
        rich_tracebacks=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

"""
Logging setup for delta_render.

Library modules only create module level loggers; handlers are installed by
applications (the command line interface) through :func:`configure_logging`.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "delta_render"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    level: str = "WARNING",
    rich_output: bool = True,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rich_output: Use a :class:`rich.logging.RichHandler` instead of a
            plain stream handler
        console: Console for the rich handler (defaults to stderr)

    Returns:
        The configured package logger
    """
    if level.upper() not in VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    return logger

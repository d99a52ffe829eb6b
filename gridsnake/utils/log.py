"""
Logging setup - routes the gridsnake loggers through rich.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig

LOGGER_NAME = "gridsnake"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger.

    Installs a RichHandler for the terminal and, if config.log_file is set,
    a plain file handler. Calling it again replaces the previous handlers.

    Args:
        config: Level and optional log file
        console: Console for the rich handler (defaults to stderr)

    Returns:
        The configured "gridsnake" logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(config.level.upper())
    logger.propagate = False

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logger.addHandler(rich_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger

"""Logging configuration for wc-reactor.

Library modules get their logger with ``get_logger(__name__)``; all of them
live under the ``wc_reactor`` logger, which ``setup_logging`` configures with
a rich console handler and an optional debug file.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "wc_reactor"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    return logging.getLogger(name)


def setup_logging(
    level: int = logging.WARNING,
    log_file: str | Path | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Handlers installed by an earlier call are closed and replaced, so the
    function can be called once per build.

    Args:
        level: Logging level for every handler.
        log_file: Optional path of a debug file. It is only created when the
            first record is written.
        console: Whether to log to the terminal through rich.

    Returns:
        The configured ``wc_reactor`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = RichHandler(
            level=level, show_path=False, rich_tracebacks=True
        )
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def remove_file_handlers(logger: logging.Logger) -> list[Path]:
    """Detach and close the file handlers of ``logger``.

    Returns:
        Paths of the files the handlers were writing to.
    """
    paths = []
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
            paths.append(Path(handler.baseFilename))
    return paths

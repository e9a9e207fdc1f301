"""Logging configuration for the XML dispatcher."""

import logging
import os
import sys
from contextlib import contextmanager
from typing import IO, Iterator, List, Tuple, Union

PACKAGE_LOGGER_NAME = "xml_dispatcher"

# Checked in order; the first one set wins.
LOG_LEVEL_ENV_VARS = ("XML_DISPATCHER_LOG_LEVEL", "LOG_LEVEL")
DEFAULT_LOG_LEVEL = "ERROR"

LOG_FORMAT = "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"


def resolve_log_level() -> Union[int, str]:
    """Return the level named by the environment, ERROR when none is set.

    Numeric levels ("10", "20") are accepted as well as names. Unknown names
    are returned as-is and rejected by ``Logger.setLevel``.
    """
    level = DEFAULT_LOG_LEVEL
    for env_var in LOG_LEVEL_ENV_VARS:
        value = os.getenv(env_var)
        if value:
            level = value
            break
    level = level.strip().upper()
    return int(level) if level.isdigit() else level


def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses XML_DISPATCHER_LOG_LEVEL (or LOG_LEVEL) to determine the log level.
    If not set, defaults to ERROR level, which hides the INFO lines the
    example handlers write when they process a document.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(resolve_log_level())

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


def _package_stream_handlers(name: str) -> List[logging.StreamHandler]:
    loggers = [logging.getLogger(name)] + [
        logger
        for logger_name, logger in list(logging.Logger.manager.loggerDict.items())
        if logger_name.startswith(f"{name}.") and isinstance(logger, logging.Logger)
    ]
    handlers = []
    for logger in loggers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handlers.append(handler)
    return handlers


@contextmanager
def redirect_log_stream(
    stream: IO[str], name: str = PACKAGE_LOGGER_NAME
) -> Iterator[None]:
    """Point the package's stream handlers at ``stream`` for the block.

    Covers the logger called ``name`` and its child loggers. The previous
    streams are restored on exit.
    """
    swapped: List[Tuple[logging.StreamHandler, IO[str]]] = []
    for handler in _package_stream_handlers(name):
        previous = handler.setStream(stream)
        if previous is not None:
            swapped.append((handler, previous))
    try:
        yield
    finally:
        for handler, previous in swapped:
            handler.setStream(previous)


# Package logger instance
logger = get_logger()

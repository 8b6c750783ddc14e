"""Logging helpers.

Library modules only log through :func:`get_logger` at DEBUG level and
never install handlers. Applications that want to see those records call
:func:`setup_logging`.
"""

import logging
import sys
from typing import Any, Optional, TextIO

PACKAGE_LOGGER = "file_normalize"

FORMATS = {
    "simple": "%(levelname)-8s | %(name)s | %(message)s",
    "detailed": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(
    level: str = "WARNING",
    format: str = "simple",
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach one console handler to the file_normalize logger.

    Calling it again replaces the handler from the previous call rather
    than stacking a second one. The root logger is left alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Line layout, ``simple`` or ``detailed``
        stream: Output stream, stderr by default

    Returns:
        The installed handler
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, "_file_normalize", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter(FORMATS.get(format, FORMATS["simple"]), datefmt="%Y-%m-%d %H:%M:%S")
    )
    handler._file_normalize = True
    logger.addHandler(handler)
    return handler


def setup_logging_from_config(config: Any) -> logging.Handler:
    """Configure logging from a LoggingConfig or a NormalizeConfig."""
    settings = getattr(config, "logging", config)
    return setup_logging(level=settings.level, format=settings.format)

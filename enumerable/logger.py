"""Global logger configuration for the enumerable package.

Importing the package only attaches a NullHandler to the `enumerable`
logger, so records reach whatever handlers the host application configures.
Call `setup_logger` to get a stderr handler of the package's own.
"""

import logging
import sys

from enumerable.config import get_log_level

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "enumerable",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to
            ENUMERABLE_LOG_LEVEL
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or get_log_level()
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger


# Default logger instance for the package
logger = logging.getLogger("enumerable")
logger.addHandler(logging.NullHandler())

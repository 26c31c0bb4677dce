"""Logging configuration for the library."""

import logging
import sys

from jsonapi_core.core.config import get_settings


def setup_logging() -> None:
    """Configure logging for applications embedding the library.

    Level is settings.log_level when set, else DEBUG when settings.debug is
    True, otherwise INFO. Output goes to stdout.
    """
    settings = get_settings()
    if settings.log_level:
        log_level = getattr(logging, settings.log_level)
    else:
        log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)

"""
Logging Configuration
Attaches console (and optional file) output to the 'fractalgui' logger.
"""
import logging
import sys
from typing import Optional

from fractalgui.config import LOG_DATEFMT, LOG_FILE, LOG_FORMAT, LOG_LEVEL

PACKAGE_LOGGER = "fractalgui"


def setup_logging(level: int = LOG_LEVEL, log_file: Optional[str] = LOG_FILE) -> logging.Logger:
    """
    Configure the package logger and return it.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level for the logger and its handlers.
        log_file: If given, the log is also written (overwritten) to this path.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file})")
    return logger

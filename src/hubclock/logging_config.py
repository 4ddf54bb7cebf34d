"""
Logging Configuration
Sets up the 'hubclock' namespace logger for the application.

The level defaults to config.LOG_LEVEL (HUBCLOCK_LOG_LEVEL in the
environment), so a bare setup_logging() honours the user's setting.
"""
import logging
import sys
from typing import Optional

from hubclock import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'hubclock' logger and returns it.

    Args:
        level: Logging level (e.g. logging.DEBUG). None uses config.LOG_LEVEL.
        log_file: Optional path to also save logs to (overwritten each run).
    """
    if level is None:
        level = config.LOG_LEVEL

    logger = logging.getLogger("hubclock")
    logger.setLevel(level)

    # Replace our own handlers only; a restart must not double every line
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_make_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.info("Logging initialized at %s%s.", logging.getLevelName(level),
                f" (also writing to {log_file})" if log_file else "")
    return logger

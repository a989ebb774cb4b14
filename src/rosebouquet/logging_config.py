"""
Logging Configuration
Attaches console/file handlers to the 'rosebouquet' logger namespace.
"""
import logging
import sys
from typing import Optional, Union

from rosebouquet import config

PACKAGE_LOGGER = "rosebouquet"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that are chatty at DEBUG level
QUIET_LOGGERS = ("matplotlib", "PIL")


def _resolve_level(level: Union[int, str, None]) -> int:
    """Accept logging.DEBUG, "debug" or None (config.LOG_LEVEL)."""
    if level is None:
        return config.LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger once per process (safe to call again).

    Args:
        level: Level as int or name; None takes ROSEBOUQUET_LOG_LEVEL.
        log_file: Optional path; the file is truncated on each setup.

    Returns:
        The 'rosebouquet' logger.
    """
    level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(
        f"Logging initialized at {logging.getLevelName(level)}"
        + (f", writing to {log_file}." if log_file else ".")
    )
    return logger

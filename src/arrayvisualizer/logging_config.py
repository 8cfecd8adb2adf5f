"""
Logging Configuration
Attaches console (and optionally file) output to the 'arrayvisualizer' logger.
"""
import logging
import sys
from typing import Optional

from arrayvisualizer import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package's log records to stdout and, if given, to a file.

    Args:
        level: Logging level. Defaults to config.LOG_LEVEL
            (ARRAYVISUALIZER_LOG_LEVEL environment variable).
        log_file: Optional path; the file is truncated on every start.

    Returns:
        The 'arrayvisualizer' logger.
    """
    if level is None:
        level = config.LOG_LEVEL

    logger = logging.getLogger("arrayvisualizer")
    logger.setLevel(level)

    # Only our own handlers; ancestors (e.g. a test harness on root) are left alone
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}.")
    return logger

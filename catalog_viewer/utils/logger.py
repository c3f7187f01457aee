"""Logging configuration for Catalog Viewer."""

import sys
from typing import Optional

from loguru import logger

from catalog_viewer.config import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure the catalog logger.

    The console sink writes to stderr so CLI output on stdout stays
    parseable. A rotating file sink is added only when a log file is set.

    Args:
        level: Minimum level; defaults to settings.log_level
        log_file: Log file path; defaults to settings.log_file
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

    return logger


logger = setup_logger()

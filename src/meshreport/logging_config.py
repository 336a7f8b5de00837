"""
Logging Configuration
Sets up the package logger for the console application.
"""
import logging
import os
import sys
from typing import Optional

from meshreport.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

PACKAGE_LOGGER = "meshreport"


def resolve_level(level: Optional[int | str] = None) -> int:
    """
    Level precedence: function arg > MESHREPORT_LOG_LEVEL > WARNING.
    Unknown level names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    level_name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(level_name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: Optional[int | str] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'meshreport' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, "INFO"). None reads the
            MESHREPORT_LOG_LEVEL environment variable.
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)

    # Get the logger for our package
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on a second call
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # 1. Console Handler (stderr, stdout carries the report)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")

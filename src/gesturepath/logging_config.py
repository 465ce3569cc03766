"""
Logger setup for the gesturepath command line.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers; the CLI calls :func:`setup_logging` once per invocation.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "gesturepath"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Args:
        level: Logging level as a number or a name ("DEBUG", "warning", ...).
            Unknown names fall back to INFO.
        log_file: Optional path that also receives the records.

    Returns:
        The 'gesturepath' logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated CLI invocations in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    # stderr, so exported paths on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging at %s", logging.getLevelName(level))
    return logger

"""
Logging Configuration
Sets up the logger of the concave_hull package.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    return handler


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'concave_hull' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("concave_hull")
    logger.setLevel(level)

    # Calling twice must not duplicate the output
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level))
    if log_file:
        logger.addHandler(_handler(
            logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    return logger

"""
Logging utilities for the stacked chart editor.

All modules log through the "stackviz" logger; the Dash/Flask request log
is left to werkzeug.
"""

import logging
import sys
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger: Optional[logging.Logger] = None


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up the editor logger.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        log_file: Optional file to also write logs to

    Returns:
        Configured logger
    """
    global _logger

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("stackviz")
    logger.setLevel(level)
    logger.propagate = False

    # Replace handlers so repeated setup does not duplicate output
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the editor logger, configuring a default one on first use."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger

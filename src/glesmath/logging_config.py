"""
Logging Configuration
=====================
Routes the library's diagnostics to the console and, optionally, a file.

The library itself never adds handlers; host applications call setup_logging()
when they want the diagnostics printed. What gets logged under 'glesmath':

    WARNING  glesmath.vectors.base  a cached to_array() view was altered in
                                    every slot (DEBUG mode only)
    WARNING  glesmath.mode          an unknown mode was replaced by DEBUG
    DEBUG    glesmath.mode          the mode changed

Numeric edge cases (NaN/Inf results) are never logged.
"""
import logging
import sys
from typing import Optional

from glesmath import mode

PACKAGE_LOGGER_NAME = "glesmath"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'glesmath' namespace.

    Array mismatch warnings only fire in DEBUG mode, so the active mode is
    reported once the handlers are in place.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Repeated setup replaces the handlers instead of stacking them
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if mode.is_debug_mode():
        logger.info("glesmath logging initialized, array mismatch checks are on (debug mode).")
    else:
        logger.info("glesmath logging initialized, array mismatch checks are off (release mode).")
    return logger

"""Logging for the ``savings_compare`` package.

Only the package logger is configured; the root logger and any other
library's handlers are left alone.
"""

import logging
import sys

PACKAGE_LOGGER = "savings_compare"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Point the package logger at stdout with ``level``.

    Repeated calls replace the previous handler, so each app built by
    ``create_app`` gets the level from its own settings.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    # module loggers live under the package logger when name is __name__
    return logging.getLogger(name)

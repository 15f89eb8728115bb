"""Logging configuration for the pondo command line."""

import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL_ENV = "PONDO_LOG_LEVEL"


def resolve_level(verbose: bool = False) -> int:
    """Pick the log level: --verbose wins, then $PONDO_LOG_LEVEL, then WARNING."""
    if verbose:
        return logging.DEBUG

    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send pondo's log records to stderr.

    Only the ``pondo`` logger is configured; handlers from an earlier call
    are replaced so repeated invocations in one process do not duplicate
    output.
    """
    logger = logging.getLogger("pondo")
    logger.setLevel(resolve_level(verbose))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger

"""
Logging setup for the image grid tool.

Every module logs through the "imagegrid" logger, which writes one line
per record to stderr. The CLI adjusts its level from -v/--verbose and
-q/--quiet with set_verbosity.
"""

import logging
from typing import TextIO

LOGGER_NAME = "imagegrid"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        stream: TextIO | None = None,
) -> logging.Logger:
    """
    Return the named logger with a formatted stream handler attached.

    The handler is added on the first call only; later calls just reset
    the level. A stream of None means stderr.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.propagate = False
    return log


def verbosity_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def set_verbosity(*, verbose: bool = False, quiet: bool = False) -> None:
    logger.setLevel(verbosity_level(verbose=verbose, quiet=quiet))


logger = setup_logger()

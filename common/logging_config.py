"""
Logging Configuration for Geodesic Polygon Measurement.

All modules obtain their logger through `get_logger` so that output from
the accumulator, the batch helpers and the validation checks shares one
format and can be silenced or raised together with `configure_logging`.

The polygon accumulator sits on interactive hot paths (one call per
pointer movement), so it never logs per vertex; only lifecycle events
and validation outcomes are recorded.
"""

import logging
import sys
from typing import Set


_PROJECT_LOGGERS: Set[str] = set()


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the polygon measurement system.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    _PROJECT_LOGGERS.add(name)
    return logger


def configure_logging(level: int) -> None:
    """Set the level of every logger handed out by `get_logger`.

    Parameters
    ----------
    level : int
        Logging level, e.g. ``logging.DEBUG``.
    """
    for name in _PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(level)

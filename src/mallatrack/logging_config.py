"""Central logging configuration.

Usage:
    from mallatrack.logging_config import get_logger
    logger = get_logger(__name__)
    logger.debug("Toggled course", extra={"course_id": course_id})
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def configure_logging(*, log_level: str = "WARNING", debug: bool = False) -> None:
    """Configure package logging.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        debug: If True, use DEBUG level regardless of log_level.
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates when the CLI is re-entered.
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)

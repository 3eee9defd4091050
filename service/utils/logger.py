"""
Logging setup and the category-based logging sink.

Every message goes to a stdlib logger named after its category
(e.g. "http-access"), so handlers and levels can be tuned per category.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging output.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def log(level: str, category: str, message: str) -> None:
    """Log ``message`` at ``level`` on the logger named ``category``.

    Unknown level names log at info.
    """
    logging.getLogger(category).log(LEVELS.get(level.lower(), logging.INFO), message)

"""
Logging configuration for the application.

The ``app`` logger tree follows the configured level; everything else
(third-party libraries, the ASGI server) is held at WARNING or above.
Logging must not change program behavior.
Never logs sensitive data (request bodies, raw payloads).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
APP_LOGGER = "app"


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value; unknown names give INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the ledger application.

    Args:
        level: Level for the ledger's own loggers (DEBUG, INFO, WARNING, ERROR).
    """
    app_level = resolve_level(level)
    logging.basicConfig(
        level=max(app_level, logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(APP_LOGGER).setLevel(app_level)

    # Request lines duplicate our own WARNING logs for rejected calls
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

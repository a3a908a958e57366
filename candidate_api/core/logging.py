"""Logging setup for the API process.

Everything goes to stdout through one handler on the root logger, so
uvicorn, the route handlers and the gateway share a single line format.
"""

import logging
import sys

from candidate_api.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# HTTP client and access-log chatter; request outcomes are logged by the routes
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "uvicorn.access")


def setup_logging() -> None:
    """Install the stdout handler at ``settings.LOG_LEVEL``.

    Safe to call more than once: the root handlers are replaced, not added to.
    Unknown level names fall back to INFO.
    """
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

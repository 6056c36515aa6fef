"""Logging setup for the proxy process."""

import logging
import sys
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"

# Hits, misses and expirations are logged here at DEBUG.
CACHE_LOGGER = "riftproxy.services"


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def setup_logging(level: Optional[str] = None, cache_level: Optional[str] = None) -> None:
    """
    Configure stdout logging for the proxy.

    Args:
        level: level of the ``riftproxy`` loggers (unknown names fall back to INFO).
        cache_level: separate level for the cache layer, e.g. ``DEBUG`` to trace
            every hit and miss without turning the whole service to DEBUG.
            Defaults to *level*.
    """
    log_level = _level(level)

    logging.basicConfig(
        level=log_level,
        format=FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("riftproxy").setLevel(log_level)
    logging.getLogger(CACHE_LOGGER).setLevel(_level(cache_level, log_level))

    logging.getLogger(__name__).info(
        "Logging initialized at level %s (cache: %s)",
        logging.getLevelName(log_level),
        logging.getLevelName(logging.getLogger(CACHE_LOGGER).level),
    )

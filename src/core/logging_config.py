"""Structured logging configuration.

This module configures structlog once per process with a stable JSON
format and hands out named loggers to the rest of the code base.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL

_CONFIGURED_LEVEL: str | None = None


def configure_logging(log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and level filtering.

    Calling it again with the same level is a no-op. Loggers are lazy
    proxies, so a later call with a new level applies to existing loggers.

    Args:
        log_level: Minimum level name, for example ``INFO``.
    """
    global _CONFIGURED_LEVEL
    normalized_level = log_level.upper()
    if _CONFIGURED_LEVEL == normalized_level:
        return
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(normalized_level)
        ),
        cache_logger_on_first_use=False,
    )
    _CONFIGURED_LEVEL = normalized_level


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger bound to the module name.
    """
    if _CONFIGURED_LEVEL is None:
        configure_logging()
    return structlog.get_logger(name)

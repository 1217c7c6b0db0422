"""Structured logging configuration.

This module initializes structlog with a stable structured format
shared by every propdb module. Debug events are filtered out.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

DEFAULT_LOG_LEVEL = logging.INFO


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with JSON output at INFO level and above.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(DEFAULT_LOG_LEVEL),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)

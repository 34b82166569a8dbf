"""Structured logging for the library and the CLI.

Library loggers are bound to stdlib loggers, so nothing is emitted unless
the host application (or ``configure_logging``) enables their level and
installs a handler.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.WARNING


def configure_logging(level: str = "WARNING") -> None:
    """Send JSON log lines to stderr at ``level`` and above."""
    number = _level_number(level)
    logging.basicConfig(format="%(message)s", level=number)
    logging.getLogger().setLevel(number)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger on top of the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

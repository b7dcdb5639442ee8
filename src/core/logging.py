"""Structured logging for the sampling helpers.

Library modules obtain loggers through get_logger() and never configure
output themselves. Applications call configure_logging() once to route
events through structlog's ProcessorFormatter onto the ``randhelpers``
stdlib logger, so structlog events and plain stdlib records share one format.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    "LOGGER_NAMESPACE",
    "configure_logging",
    "get_logger",
]

LOGGER_NAMESPACE = "randhelpers"


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = "WARNING", *, json_output: bool = False) -> logging.Handler:
    """Configure structlog and attach a handler to the package logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: Emit JSON lines if True, console output otherwise.

    Returns:
        The installed stdlib handler.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler


def get_logger(name: str) -> Any:
    """Return a structlog logger under the package namespace.

    Args:
        name: Module name, usually ``__name__``.
    """
    return structlog.get_logger(f"{LOGGER_NAMESPACE}.{name}")

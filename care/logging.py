"""Structured logging with a per-request id."""
from __future__ import annotations

import logging
import uuid
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "bind_request_id",
    "clear_request_context",
]


def bind_request_id(request_id: str | None = None) -> str:
    """Bind ``request_id`` (or a new one) to every log entry of this context."""
    rid = request_id or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=rid)
    return rid


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def configure_logging(*, json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog for the application.

    Args:
        json_output: True for JSON (production), False for console (dev).
        level: Log level string.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

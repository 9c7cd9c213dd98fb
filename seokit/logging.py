"""Structured logging configuration.

The analyzer modules log through ``structlog.get_logger(__name__)`` and never
configure anything themselves. Applications embedding the analyzer call
:func:`setup_logging` once at startup; the analyzer binds the page URL as a
context variable for the duration of each analysis, so every event emitted
while a page is processed carries it.
"""

import logging
from typing import Any

import structlog

from seokit.config import get_settings


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structlog for the analyzer.

    Args:
        level: Log level name; defaults to ``SEOKIT_LOG_LEVEL``
        json_output: Render JSON lines; defaults to True in production
    """
    settings = get_settings()

    level_name = (level or settings.log_level).upper()
    if settings.debug and level is None:
        level_name = "DEBUG"
    log_level = getattr(logging, level_name, logging.INFO)

    if json_output is None:
        json_output = settings.is_production

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=not settings.is_test,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=not settings.is_test,
    )


def bind_page(url: str) -> Any:
    """Context manager binding ``url`` to every log event inside it."""
    return structlog.contextvars.bound_contextvars(url=url)

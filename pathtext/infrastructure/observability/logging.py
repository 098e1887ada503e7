"""Structured logging setup."""

import logging
import sys

import structlog

from pathtext.infrastructure.config.settings import Settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog.

    Log lines go to stderr so command output on stdout stays parseable.
    """
    settings = settings or Settings()
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

"""
Social Identity Engine — Structured logging configuration

Every module obtains its logger with ``structlog.get_logger(...)``; this
module only wires the processor chain once per process (CLI entry points call
``configure_logging`` before doing any work).
"""

from __future__ import annotations

import logging
import sys

import structlog

from social_identity.config import get_settings


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog for the current process.

    ``level`` and ``json_output`` default to ``LOG_LEVEL`` / ``LOG_JSON`` from the
    settings.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    min_level = getattr(logging, level_name, logging.INFO)
    use_json = settings.LOG_JSON if json_output is None else json_output

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

"""Structured logging configuration using structlog.

Production output is JSON; dev output goes through the console renderer.
"""

from __future__ import annotations

import logging

import structlog

from gauth.config.settings import get_settings


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog processors, level filtering and output renderer.

    Unset arguments fall back to settings: ``LOG_LEVEL`` for the level, and
    JSON output only when ``GAUTH_ENV=prod``.
    """
    if level is None or json_logs is None:
        settings = get_settings()
        level = level or settings.log_level
        json_logs = settings.gauth_env == "prod" if json_logs is None else json_logs

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None, **context: object
) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger named ``name`` with ``context`` bound.

    Usage:
        log = get_logger(__name__)
        log.info("oauth_profile_fetched", open_id=profile.open_id)
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger  # type: ignore[no-any-return]

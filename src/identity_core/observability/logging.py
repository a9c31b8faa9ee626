"""structlog configuration for services embedding identity-core."""

from __future__ import annotations

import logging

import structlog

from identity_core.common.exceptions import ConfigurationError
from identity_core.config import IdentitySettings, get_settings


def configure_logging(settings: IdentitySettings | None = None) -> None:
    """
    Configure structlog from settings.

    Args:
        settings: Settings to apply; defaults to ``get_settings()``

    Raises:
        ConfigurationError: If the configured log level is unknown
    """
    settings = settings or get_settings()
    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        raise ConfigurationError(
            f"Unknown log level: {settings.log_level}",
            details={"log_level": settings.log_level},
        )

    renderer: structlog.typing.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

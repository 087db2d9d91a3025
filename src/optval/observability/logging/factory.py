"""Observability – JsonLoggerFactory and configure_logging."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from optval.config.settings import EnvSettingsLoader, LoggingSettings, SettingsLoader


class JsonLoggerFactory:
    """Configure structlog on top of stdlib logging."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        json: bool = True,
        *,
        cache_logger_on_first_use: bool = True,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache_logger_on_first_use,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    loader: SettingsLoader | None = None,
) -> LoggingSettings:
    """Apply *settings*, or load them with *loader* when omitted.

    The default loader reads ``OPTVAL_LOG_*`` from the environment; pass a
    :class:`~optval.config.settings.DotenvSettingsLoader` to read a ``.env``
    file first. Returns the settings that were applied.
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(LoggingSettings)
    JsonLoggerFactory.configure(level=settings.level_number, json=settings.json)
    return settings


__all__ = ["JsonLoggerFactory", "configure_logging"]

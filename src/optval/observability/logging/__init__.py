"""Observability – structlog configuration and logger helper."""
from optval.observability.logging.factory import JsonLoggerFactory, configure_logging
from optval.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]

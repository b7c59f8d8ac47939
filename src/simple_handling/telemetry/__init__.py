"""Telemetry - structured logging for dispatch events."""

from .logging import (
    HandlingLogger,
    PlainLogFormatter,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
    reset_loggers,
    to_logging_level,
)

__all__ = [
    "HandlingLogger",
    "PlainLogFormatter",
    "StructuredLogFormatter",
    "configure_logging",
    "get_logger",
    "reset_loggers",
    "to_logging_level",
]

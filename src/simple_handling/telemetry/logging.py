"""Structured logging with OpenTelemetry trace context.

Library code only creates loggers under the ``simple_handling`` namespace;
it never installs output handlers or sets levels. The package logger carries
a NullHandler, so dispatch events go nowhere until the application either
configures stdlib logging itself or calls ``configure_logging``.

Usage:
    from simple_handling.telemetry.logging import configure_logging

    configure_logging(LogLevel.DEBUG)  # JSON lines on stderr
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from opentelemetry import trace

from simple_handling.types import LogFormat, LogLevel

LOGGER_NAMESPACE = "simple_handling"

_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    }
)

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def to_logging_level(level: LogLevel | int) -> int:
    """Map a LogLevel onto a stdlib logging level (ints pass through)."""
    if isinstance(level, LogLevel):
        return _LEVELS[level]
    return level


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - Additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class PlainLogFormatter(logging.Formatter):
    """Single-line ``[component] message key=value`` formatter."""

    def format(self, record: logging.LogRecord) -> str:
        extras = " ".join(
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        )
        line = f"[{record.name}] {record.levelname} {record.getMessage()}"
        return f"{line} {extras}" if extras else line


class HandlingLogger:
    """Structured logger facade.

    Wraps a stdlib logger under the ``simple_handling`` namespace; keyword
    arguments become structured fields on the record. Level and output are
    left to the application.
    """

    def __init__(self, name: str):
        """Initialize logger.

        Args:
            name: Logger name (component name)
        """
        self._logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: LogLevel | int) -> bool:
        """Check whether a message at ``level`` would be emitted."""
        return self._logger.isEnabledFor(to_logging_level(level))

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra=kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)


# Logger cache
_loggers: dict[str, HandlingLogger] = {}

# Handler installed by configure_logging, if any
_configured_handler: logging.Handler | None = None


def get_logger(name: str) -> HandlingLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (component name)

    Returns:
        HandlingLogger instance
    """
    if name not in _loggers:
        _loggers[name] = HandlingLogger(name)
    return _loggers[name]


def configure_logging(
    level: LogLevel | int | None = None,
    log_format: LogFormat | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Send simple_handling events to ``stream`` (stderr by default).

    Opt-in output for applications that do not configure logging
    themselves. Level and format default to the process settings
    (``SIMPLE_HANDLING_LOG_LEVEL`` / ``SIMPLE_HANDLING_LOG_FORMAT``).
    Calling it again replaces the previously installed handler.

    Returns:
        The installed handler
    """
    global _configured_handler  # noqa: PLW0603
    from simple_handling.config import get_settings

    settings = get_settings()
    level = settings.log_level if level is None else level
    log_format = settings.log_format if log_format is None else log_format

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if _configured_handler is not None:
        package_logger.removeHandler(_configured_handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if log_format == LogFormat.PLAIN:
        handler.setFormatter(PlainLogFormatter())
    else:
        handler.setFormatter(StructuredLogFormatter())

    package_logger.addHandler(handler)
    package_logger.setLevel(to_logging_level(level))
    _configured_handler = handler
    return handler


def reset_loggers() -> None:
    """Reset logger cache and undo configure_logging (for testing)."""
    global _loggers, _configured_handler  # noqa: PLW0603
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if _configured_handler is not None:
        package_logger.removeHandler(_configured_handler)
        _configured_handler = None
    package_logger.setLevel(logging.NOTSET)
    for handling_logger in _loggers.values():
        logging.getLogger(handling_logger.name).setLevel(logging.NOTSET)
    _loggers = {}

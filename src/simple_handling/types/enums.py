"""Shared enumerations for simple_handling."""

from enum import Enum


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log output format."""

    PLAIN = "plain"
    JSON = "json"


class HandlerShape(str, Enum):
    """How a registered handler is called."""

    ACTION = "action"  # handler(error)
    ACTION_WITH_INPUT = "action_with_input"  # handler(error, handling_input)

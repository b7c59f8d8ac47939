"""Settings data models."""

from dataclasses import dataclass

from simple_handling.types import LogFormat, LogLevel


@dataclass(frozen=True)
class HandlingSettings:
    """Re-raise default for configurations built with these settings, and
    the level/format ``configure_logging`` uses when called without arguments.
    """

    throw_if_not_handled: bool = True
    log_level: LogLevel = LogLevel.WARN
    log_format: LogFormat = LogFormat.JSON

"""Settings loader.

Settings come from environment variables only, and only reach a
configuration that is given them (``prepare(settings=load_settings())``):

- ``SIMPLE_HANDLING_THROW_IF_NOT_HANDLED``: true/false, 1/0, yes/no, on/off
- ``SIMPLE_HANDLING_LOG_LEVEL``: DEBUG, INFO, WARN, ERROR
- ``SIMPLE_HANDLING_LOG_FORMAT``: json, plain
"""

import os
import re
from collections.abc import Mapping

from simple_handling.errors import create_error
from simple_handling.types import LogFormat, LogLevel

from .models import HandlingSettings

ENV_PREFIX = "SIMPLE_HANDLING_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

# Pattern: ${VAR}, ${VAR:-default}, ${VAR:?error}
_ENV_REF_PATTERN = re.compile(r"\$\{([^}:]+)(?::([?-])([^}]*))?\}")


def resolve_env_vars(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        String with env vars resolved

    Raises:
        HandlingError: If required var not set
    """
    env = os.environ if environ is None else environ

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = env.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        if operator == "?":
            error_msg = operand or f"Required environment variable {var_name} not set"
            raise create_error("CONFIG_INVALID", detail=error_msg)
        raise create_error(
            "CONFIG_INVALID",
            detail=f"Required environment variable {var_name} not set",
        )

    return _ENV_REF_PATTERN.sub(replacer, value)


def parse_bool(name: str, raw: str) -> bool:
    """Parse a boolean setting value."""
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise create_error("CONFIG_INVALID", detail=f"{name} must be a boolean, got '{raw}'")


def _parse_log_level(name: str, raw: str) -> LogLevel:
    normalized = raw.strip().upper()
    if normalized == "WARNING":
        normalized = LogLevel.WARN.value
    try:
        return LogLevel(normalized)
    except ValueError:
        allowed = ", ".join(level.value for level in LogLevel)
        raise create_error(
            "CONFIG_INVALID", detail=f"{name} must be one of {allowed}, got '{raw}'"
        ) from None


def _parse_log_format(name: str, raw: str) -> LogFormat:
    try:
        return LogFormat(raw.strip().lower())
    except ValueError:
        allowed = ", ".join(fmt.value for fmt in LogFormat)
        raise create_error(
            "CONFIG_INVALID", detail=f"{name} must be one of {allowed}, got '{raw}'"
        ) from None


def load_settings(environ: Mapping[str, str] | None = None) -> HandlingSettings:
    """Build settings from environment variables.

    Values may themselves reference other variables (``${VAR:-default}``).
    Unset variables keep the HandlingSettings defaults.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        HandlingSettings instance

    Raises:
        HandlingError: CONFIG_INVALID if a value cannot be parsed
    """
    env = os.environ if environ is None else environ
    defaults = HandlingSettings()

    def read(key: str) -> str | None:
        raw = env.get(ENV_PREFIX + key)
        if raw is None:
            return None
        return resolve_env_vars(raw, env)

    throw_raw = read("THROW_IF_NOT_HANDLED")
    level_raw = read("LOG_LEVEL")
    format_raw = read("LOG_FORMAT")

    return HandlingSettings(
        throw_if_not_handled=(
            parse_bool(ENV_PREFIX + "THROW_IF_NOT_HANDLED", throw_raw)
            if throw_raw is not None
            else defaults.throw_if_not_handled
        ),
        log_level=(
            _parse_log_level(ENV_PREFIX + "LOG_LEVEL", level_raw)
            if level_raw is not None
            else defaults.log_level
        ),
        log_format=(
            _parse_log_format(ENV_PREFIX + "LOG_FORMAT", format_raw)
            if format_raw is not None
            else defaults.log_format
        ),
    )


# Convenience singleton
_default_settings: HandlingSettings | None = None


def get_settings() -> HandlingSettings:
    """Get process-wide settings, loading them from the environment once."""
    global _default_settings  # noqa: PLW0603
    if _default_settings is None:
        _default_settings = load_settings()
    return _default_settings


def reset_settings() -> None:
    """Forget cached settings (for testing)."""
    global _default_settings  # noqa: PLW0603
    _default_settings = None

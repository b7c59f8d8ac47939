"""Configuration - environment-driven settings."""

from .loader import (
    ENV_PREFIX,
    get_settings,
    load_settings,
    parse_bool,
    reset_settings,
    resolve_env_vars,
)
from .models import HandlingSettings

__all__ = [
    "ENV_PREFIX",
    "HandlingSettings",
    "get_settings",
    "load_settings",
    "parse_bool",
    "reset_settings",
    "resolve_env_vars",
]

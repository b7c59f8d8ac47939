"""Simple Handling - ordered, typed exception handler chains.

Register handlers for exception types ahead of time, then dispatch a caught
exception through them; the first applicable handler wins.

    configuration = (
        Handling.prepare()
        .on(KeyError, lambda ex: log_missing(ex))
        .on(LookupError, lambda ex: log_lookup(ex))
    )

    try:
        ...
    except Exception as ex:
        configuration.catch(ex)
"""

from simple_handling.config import HandlingSettings, load_settings
from simple_handling.errors import HandlingError, InvalidArgumentError, InvalidCastError
from simple_handling.handling import (
    HandlerEntry,
    Handling,
    HandlingConfiguration,
    HandlingInput,
    HandlingResult,
    get_parameter,
    get_result,
    narrow,
    on,
    on_input,
    prepare,
)
from simple_handling.telemetry import configure_logging
from simple_handling.types import HandlerShape

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "Handling",
    "prepare",
    "on",
    "on_input",
    "HandlingConfiguration",
    "HandlingResult",
    "HandlingInput",
    "HandlerEntry",
    "HandlerShape",
    "get_result",
    "get_parameter",
    "narrow",
    "HandlingError",
    "InvalidArgumentError",
    "InvalidCastError",
    "HandlingSettings",
    "load_settings",
    "configure_logging",
]

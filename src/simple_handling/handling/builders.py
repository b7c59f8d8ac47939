"""Entry points for building handling configurations."""

from collections.abc import Callable
from typing import Any, TypeVar

from simple_handling.config import HandlingSettings

from .configuration import HandlingConfiguration
from .entry import ErrorType, validate_callable
from .input import HandlingInput

TParameter = TypeVar("TParameter")
TResult = TypeVar("TResult")


def prepare(
    parameter_type: type[TParameter] | None = None,
    result_type: type[TResult] | None = None,
    *,
    settings: HandlingSettings | None = None,
) -> HandlingConfiguration[TParameter, TResult]:
    """Create an empty configuration.

    Pass ``parameter_type`` and ``result_type`` for a typed configuration;
    leave them out for one whose payloads are opaque.
    """
    return HandlingConfiguration(parameter_type, result_type, settings=settings)


def on(
    error_type: ErrorType,
    handler: Callable[[Any], Any],
    condition: Callable[[Any], bool] | None = None,
) -> HandlingConfiguration[Any, Any]:
    """Create a configuration starting with ``handler(error)``."""
    validate_callable(handler, "handler")
    return HandlingConfiguration().on(error_type, handler, condition)


def on_input(
    error_type: ErrorType,
    handler: Callable[[Any, HandlingInput[Any]], Any],
    condition: Callable[[Any, HandlingInput[Any]], bool] | None = None,
) -> HandlingConfiguration[Any, Any]:
    """Create a configuration starting with ``handler(error, handling_input)``."""
    validate_callable(handler, "handler")
    return HandlingConfiguration().on_input(error_type, handler, condition)


class Handling:
    """Namespace for the builder functions.

    Example:
        Handling.prepare().on(ValueError, handle_value_error).catch(error)
    """

    prepare = staticmethod(prepare)
    on = staticmethod(on)
    on_input = staticmethod(on_input)

"""Handler registration and dispatch."""

from .builders import Handling, on, on_input, prepare
from .casting import get_parameter, get_result, narrow
from .configuration import HandlingConfiguration
from .entry import HandlerEntry, normalize_outcome
from .input import HandlingInput
from .result import HandlingResult

__all__ = [
    # Builders
    "Handling",
    "prepare",
    "on",
    "on_input",
    # Core types
    "HandlingConfiguration",
    "HandlerEntry",
    "HandlingInput",
    "HandlingResult",
    "normalize_outcome",
    # Narrowing accessors
    "narrow",
    "get_result",
    "get_parameter",
]

"""Error handling - Structured errors raised by the library."""

from .errors import (
    ErrorCategory,
    ErrorTemplate,
    HandlingError,
    InvalidArgumentError,
    InvalidCastError,
)
from .factory import (
    ErrorFactory,
    create_error,
    get_error_factory,
    invalid_argument,
    invalid_cast,
)
from .registry import ErrorRegistry

__all__ = [
    # Core error types
    "HandlingError",
    "InvalidArgumentError",
    "InvalidCastError",
    "ErrorCategory",
    "ErrorTemplate",
    # Registry and factory
    "ErrorRegistry",
    "ErrorFactory",
    # Convenience functions
    "get_error_factory",
    "create_error",
    "invalid_argument",
    "invalid_cast",
]

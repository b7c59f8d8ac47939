"""Error factory for creating library errors from codes."""

from typing import Any

from .errors import HandlingError
from .registry import ErrorRegistry


class ErrorFactory:
    """Creates HandlingErrors from error codes."""

    def __init__(self, registry: ErrorRegistry | None = None):
        """Initialize error factory.

        Args:
            registry: Error registry (defaults to new ErrorRegistry())
        """
        self.registry = registry or ErrorRegistry()

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> HandlingError:
        """Create HandlingError directly from code.

        Args:
            code: Error code
            context: Context variables for template interpolation
            **kwargs: Additional context variables

        Returns:
            HandlingError instance
        """
        merged_context = dict(context or {})
        merged_context.update(kwargs)

        return self.registry.create(code=code, context=merged_context)


# Convenience singleton
_default_factory: ErrorFactory | None = None


def get_error_factory() -> ErrorFactory:
    """Get default error factory singleton."""
    global _default_factory  # noqa: PLW0603
    if _default_factory is None:
        _default_factory = ErrorFactory()
    return _default_factory


def create_error(code: str, **context: Any) -> HandlingError:
    """Convenience function to create error.

    Args:
        code: Error code
        **context: Context variables for template interpolation

    Returns:
        HandlingError instance
    """
    return get_error_factory().create(code, context)


def invalid_argument(argument: str, detail: str | None = None) -> HandlingError:
    """Build an INVALID_ARGUMENT error for the named argument."""
    return create_error("INVALID_ARGUMENT", argument=argument, detail=detail)


def invalid_cast(value: Any, expected_type: Any, detail: str | None = None) -> HandlingError:
    """Build an INVALID_CAST error describing a failed narrowing of ``value``."""
    return create_error(
        "INVALID_CAST",
        expected_type=_type_name(expected_type),
        actual_type=type(value).__name__,
        detail=detail,
    )


def _type_name(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(_type_name(t) for t in expected_type)
    return getattr(expected_type, "__name__", repr(expected_type))

"""Error registry for creating errors from templates."""

from typing import Any

from .errors import (
    ErrorCategory,
    ErrorTemplate,
    HandlingError,
    InvalidArgumentError,
    InvalidCastError,
)


class ErrorRegistry:
    """Registry of error templates. Creates errors from templates + context."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[str, ErrorTemplate] = {}
        self._load_builtin_templates()

    def get_template(self, code: str) -> ErrorTemplate | None:
        """Get template by error code.

        Args:
            code: Error code to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(code)

    def list_codes(self) -> list[str]:
        """List all registered error codes."""
        return list(self._templates.keys())

    def register(self, template: ErrorTemplate) -> None:
        """Add or replace a template."""
        self._templates[template.code] = template

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
    ) -> HandlingError:
        """Create error instance from template + context.

        Recognised context keys besides template variables: ``detail``,
        ``argument`` (InvalidArgumentError), ``expected_type`` and
        ``actual_type`` (InvalidCastError).

        Args:
            code: Error code
            context: Context variables for template interpolation

        Returns:
            HandlingError (or subclass) instance

        Raises:
            ValueError: If error code not found
        """
        template = self.get_template(code)
        if not template:
            msg = f"Unknown error code: {code}"
            raise ValueError(msg)

        context = context or {}

        message = self._interpolate(template.message_template, context) or f"Error {code}"
        suggestion = self._interpolate(template.suggestion_template, context)

        kwargs: dict[str, Any] = {
            "code": template.code,
            "category": template.category,
            "message": message,
            "detail": context.get("detail"),
            "suggestion": suggestion,
        }
        if issubclass(template.error_class, InvalidArgumentError):
            kwargs["argument"] = context.get("argument")
        elif issubclass(template.error_class, InvalidCastError):
            kwargs["expected_type"] = context.get("expected_type")
            kwargs["actual_type"] = context.get("actual_type")

        return template.error_class(**kwargs)

    def _interpolate(
        self,
        template: str | None,
        context: dict[str, Any],
    ) -> str | None:
        """Safe string interpolation.

        Args:
            template: Template string with {var} placeholders
            context: Context variables

        Returns:
            Interpolated string or None if template is None
        """
        if template is None:
            return None

        try:
            return template.format(**context)
        except KeyError:
            # Missing context variable - return template as-is
            return template

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        self._templates["INVALID_ARGUMENT"] = ErrorTemplate(
            code="INVALID_ARGUMENT",
            category=ErrorCategory.ARGUMENT,
            message_template="Invalid value for argument '{argument}'",
            suggestion_template="Pass a non-None value of the expected kind for '{argument}'",
            error_class=InvalidArgumentError,
        )

        self._templates["INVALID_CAST"] = ErrorTemplate(
            code="INVALID_CAST",
            category=ErrorCategory.CAST,
            message_template="Cannot use a value of type '{actual_type}' as '{expected_type}'",
            suggestion_template="Request the type the handler actually produced",
            error_class=InvalidCastError,
        )

        self._templates["CONFIG_INVALID"] = ErrorTemplate(
            code="CONFIG_INVALID",
            category=ErrorCategory.CONFIGURATION,
            message_template="Invalid configuration",
            suggestion_template="Check the SIMPLE_HANDLING_* environment variables",
        )

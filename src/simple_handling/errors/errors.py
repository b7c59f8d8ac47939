"""Structured error types raised by simple_handling itself.

Errors raised by registered handlers, and the errors being dispatched, are
never wrapped in these types; they belong to the embedding application.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error source categories."""

    ARGUMENT = "ARGUMENT"
    CAST = "CAST"
    CONFIGURATION = "CONFIGURATION"


@dataclass(eq=False)
class HandlingError(Exception):
    """Structured error with context. Base exception for all library errors."""

    # Identity
    code: str  # e.g., "INVALID_ARGUMENT"
    category: ErrorCategory

    # Messages
    message: str
    detail: str | None = None
    suggestion: str | None = None

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and diagnostics.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "detail": self.detail,
            "suggestion": self.suggestion,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(eq=False)
class InvalidArgumentError(HandlingError, ValueError):
    """A required argument was absent or of an unusable kind."""

    argument: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["argument"] = self.argument
        return data


@dataclass(eq=False)
class InvalidCastError(HandlingError, TypeError):
    """A stored value could not be narrowed to the requested type."""

    expected_type: str | None = None
    actual_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["expected_type"] = self.expected_type
        data["actual_type"] = self.actual_type
        return data


@dataclass
class ErrorTemplate:
    """Template for creating errors."""

    code: str
    category: ErrorCategory
    message_template: str  # "Invalid value for argument '{argument}'"
    suggestion_template: str | None = None
    error_class: type[HandlingError] = HandlingError

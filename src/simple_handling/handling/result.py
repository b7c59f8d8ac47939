"""Outcome of dispatching one exception through a configuration."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from simple_handling.errors import invalid_argument

from .casting import narrow

TResult = TypeVar("TResult")
T = TypeVar("T")


@dataclass(frozen=True)
class HandlingResult(Generic[TResult]):
    """Whether a handler claimed the exception, and what it produced.

    A result that was not handled never carries a payload.
    """

    handled: bool = True
    result: TResult | None = None

    def __post_init__(self) -> None:
        if not self.handled and self.result is not None:
            raise invalid_argument(
                "result", detail="a result that was not handled cannot carry a payload"
            )

    def __bool__(self) -> bool:
        return self.handled

    @classmethod
    def of(cls, value: Any) -> "HandlingResult[Any]":
        """Handled result carrying ``value``."""
        return cls(True, value)

    @classmethod
    def not_handled(cls) -> "HandlingResult[Any]":
        """Result reporting that no handler claimed the exception."""
        return cls(False)

    def result_as(self, expected_type: type[T]) -> T | None:
        """Narrow the payload to ``expected_type`` or raise InvalidCastError."""
        return narrow(self.result, expected_type)

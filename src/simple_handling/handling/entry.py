"""A single registered handler and the rules for running it."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from simple_handling.errors import invalid_argument, invalid_cast
from simple_handling.types import HandlerShape

from .input import HandlingInput
from .result import HandlingResult

ErrorType = type[BaseException] | tuple[type[BaseException], ...]

_HANDLED = HandlingResult()
_NOT_HANDLED = HandlingResult(False)


def validate_error_type(error_type: Any) -> None:
    """Ensure ``error_type`` is usable in an ``except`` clause.

    Raises:
        InvalidArgumentError: If it is not an exception class or a tuple of them
    """
    if isinstance(error_type, type) and issubclass(error_type, BaseException):
        return
    if (
        isinstance(error_type, tuple)
        and error_type
        and all(isinstance(t, type) and issubclass(t, BaseException) for t in error_type)
    ):
        return
    raise invalid_argument(
        "error_type", detail=f"expected an exception class, got {error_type!r}"
    )


def validate_callable(value: Any, argument: str, *, required: bool = True) -> None:
    """Ensure ``value`` is callable (or None when not required).

    Raises:
        InvalidArgumentError: If the check fails
    """
    if value is None:
        if required:
            raise invalid_argument(argument)
        return
    if not callable(value):
        raise invalid_argument(argument, detail=f"expected a callable, got {value!r}")


def normalize_outcome(outcome: Any, entry: "HandlerEntry") -> HandlingResult[Any]:
    """Turn a handler's return value into a HandlingResult.

    - ``None``: handled, no payload
    - ``bool``: handled iff True
    - ``HandlingResult``: used as-is

    Raises:
        InvalidCastError: For any other return value
    """
    if outcome is None:
        return _HANDLED
    if isinstance(outcome, bool):
        return _HANDLED if outcome else _NOT_HANDLED
    if isinstance(outcome, HandlingResult):
        return outcome
    raise invalid_cast(
        outcome,
        (type(None), bool, HandlingResult),
        detail=f"handler registered for {entry.error_type_name} returned {outcome!r}",
    )


@dataclass(frozen=True)
class HandlerEntry:
    """One (type, condition, handler) registration."""

    error_type: ErrorType
    handler: Callable[..., Any]
    shape: HandlerShape = HandlerShape.ACTION
    condition: Callable[..., Any] | None = None

    @property
    def error_type_name(self) -> str:
        if isinstance(self.error_type, tuple):
            return "(" + ", ".join(t.__name__ for t in self.error_type) + ")"
        return self.error_type.__name__

    def matches(self, error: BaseException) -> bool:
        """Runtime type check; subclasses of ``error_type`` match."""
        return isinstance(error, self.error_type)

    def applies(self, error: BaseException, handling_input: HandlingInput[Any]) -> bool:
        """Evaluate the condition for an error that already matched."""
        if self.condition is None:
            return True
        if self.shape is HandlerShape.ACTION_WITH_INPUT:
            return bool(self.condition(error, handling_input))
        return bool(self.condition(error))

    def invoke(
        self, error: BaseException, handling_input: HandlingInput[Any]
    ) -> HandlingResult[Any]:
        """Run the handler and normalize what it returned."""
        if self.shape is HandlerShape.ACTION_WITH_INPUT:
            outcome = self.handler(error, handling_input)
        else:
            outcome = self.handler(error)
        return normalize_outcome(outcome, self)

"""Checked narrowing of opaque parameter and result payloads."""

from typing import TYPE_CHECKING, Any, TypeVar

from simple_handling.errors import invalid_argument, invalid_cast

if TYPE_CHECKING:
    from .input import HandlingInput
    from .result import HandlingResult

T = TypeVar("T")


def validate_expected_type(expected_type: Any, argument: str) -> None:
    """Ensure ``expected_type`` is a class or a non-empty tuple of classes.

    Raises:
        InvalidArgumentError: If it is neither
    """
    if isinstance(expected_type, type):
        return
    if (
        isinstance(expected_type, tuple)
        and expected_type
        and all(isinstance(t, type) for t in expected_type)
    ):
        return
    raise invalid_argument(argument, detail=f"expected a class, got {expected_type!r}")


def narrow(value: Any, expected_type: type[T]) -> T | None:
    """Return ``value`` as ``expected_type``.

    ``None`` is the default of every opaque slot and narrows to any type.

    Raises:
        InvalidArgumentError: If ``expected_type`` is not a class
        InvalidCastError: If ``value`` is not an instance of ``expected_type``
    """
    validate_expected_type(expected_type, "expected_type")
    if value is None or isinstance(value, expected_type):
        return value
    raise invalid_cast(value, expected_type)


def get_result(result: "HandlingResult[Any] | None", expected_type: type[T]) -> T | None:
    """Read ``result.result`` as ``expected_type``.

    Raises:
        InvalidArgumentError: If ``result`` is None
        InvalidCastError: If the payload is not an ``expected_type``
    """
    if result is None:
        raise invalid_argument("result")
    return narrow(result.result, expected_type)


def get_parameter(
    handling_input: "HandlingInput[Any] | None", expected_type: type[T]
) -> T | None:
    """Read ``handling_input.parameter`` as ``expected_type``.

    Raises:
        InvalidArgumentError: If ``handling_input`` is None
        InvalidCastError: If the parameter is not an ``expected_type``
    """
    if handling_input is None:
        raise invalid_argument("handling_input")
    return narrow(handling_input.parameter, expected_type)

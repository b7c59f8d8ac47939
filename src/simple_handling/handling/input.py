"""Context handed to handlers registered with ``on_input``."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .casting import narrow

TParameter = TypeVar("TParameter")
T = TypeVar("T")


@dataclass(frozen=True)
class HandlingInput(Generic[TParameter]):
    """The exception being dispatched plus the caller's parameter.

    Created once per ``catch`` call and shared by every entry evaluated
    during that call.
    """

    error: BaseException
    parameter: TParameter | None = None

    def parameter_as(self, expected_type: type[T]) -> T | None:
        """Narrow the parameter to ``expected_type`` or raise InvalidCastError."""
        return narrow(self.parameter, expected_type)

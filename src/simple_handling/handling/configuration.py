"""Ordered handler registrations and the dispatch pass over them."""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from simple_handling.config import HandlingSettings
from simple_handling.errors import invalid_argument, invalid_cast
from simple_handling.telemetry.logging import HandlingLogger, get_logger
from simple_handling.types import HandlerShape

from .casting import validate_expected_type
from .entry import ErrorType, HandlerEntry, validate_callable, validate_error_type
from .input import HandlingInput
from .result import HandlingResult

TParameter = TypeVar("TParameter")
TResult = TypeVar("TResult")


class HandlingConfiguration(Generic[TParameter, TResult]):
    """Ordered chain of handlers. First handled entry wins.

    Build it with ``on`` / ``on_input`` (both return the configuration, so
    calls chain), then call ``catch`` any number of times. Entries are tried
    in registration order; an entry applies when the error is an instance of
    its type and its condition (if any) holds. The first entry whose handler
    reports the error as handled ends the pass.

    Example:
        configuration = (
            HandlingConfiguration()
            .on(KeyError, lambda ex: print("missing key", ex))
            .on(LookupError, lambda ex: False)
        )
        configuration.catch(KeyError("a"))
    """

    def __init__(
        self,
        parameter_type: type[TParameter] | None = None,
        result_type: type[TResult] | None = None,
        *,
        settings: HandlingSettings | None = None,
        logger: HandlingLogger | None = None,
    ) -> None:
        """Initialize an empty configuration.

        Args:
            parameter_type: When given, ``catch`` rejects parameters of any other type
            result_type: When given, handled payloads of any other type are rejected
            settings: Re-raise default. Defaults to ``HandlingSettings()``;
                the SIMPLE_HANDLING_* environment applies only when passed
                explicitly, e.g. ``settings=load_settings()``
            logger: Logger for dispatch events (defaults to the "configuration" logger)
        """
        if parameter_type is not None:
            validate_expected_type(parameter_type, "parameter_type")
        if result_type is not None:
            validate_expected_type(result_type, "result_type")

        self.parameter_type = parameter_type
        self.result_type = result_type
        self.settings = settings or HandlingSettings()
        self._logger = logger or get_logger("configuration")
        self._entries: list[HandlerEntry] = []

    @property
    def entries(self) -> tuple[HandlerEntry, ...]:
        """Snapshot of the registered entries in priority order."""
        return tuple(self._entries)

    @property
    def throw_if_not_handled(self) -> bool:
        """Default terminal behaviour of ``catch``."""
        return self.settings.throw_if_not_handled

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HandlerEntry]:
        return iter(self.entries)

    def __repr__(self) -> str:
        types = ", ".join(entry.error_type_name for entry in self._entries)
        return f"{type(self).__name__}([{types}])"

    def on(
        self,
        error_type: ErrorType,
        handler: Callable[[Any], Any],
        condition: Callable[[Any], bool] | None = None,
    ) -> "HandlingConfiguration[TParameter, TResult]":
        """Register ``handler(error)`` for errors of ``error_type``.

        The handler returns None (handled), a bool (handled iff True) or a
        HandlingResult. ``condition(error)`` runs only after the type check
        passes; a false condition skips the entry.

        Raises:
            InvalidArgumentError: If ``handler`` is None or not callable, or
                ``error_type`` is not an exception class
        """
        return self._register(error_type, handler, condition, HandlerShape.ACTION)

    def on_input(
        self,
        error_type: ErrorType,
        handler: Callable[[Any, HandlingInput[TParameter]], Any],
        condition: Callable[[Any, HandlingInput[TParameter]], bool] | None = None,
    ) -> "HandlingConfiguration[TParameter, TResult]":
        """Register ``handler(error, handling_input)`` for errors of ``error_type``.

        Same outcome rules as ``on``; the condition also receives the input.
        """
        return self._register(error_type, handler, condition, HandlerShape.ACTION_WITH_INPUT)

    def catch(
        self,
        error: BaseException,
        parameter: TParameter | None = None,
        throw_if_not_handled: bool | None = None,
    ) -> HandlingResult[TResult]:
        """Dispatch ``error`` through the registered entries.

        Args:
            error: The exception to handle
            parameter: Optional context forwarded through HandlingInput
            throw_if_not_handled: Re-raise ``error`` when nothing handles it
                (None uses ``settings.throw_if_not_handled``, True unless the
                configuration was built with other settings)

        Returns:
            The first handled result, or a not-handled result when re-raising
            is disabled

        Raises:
            InvalidArgumentError: If ``error`` is None or not an exception, or
                ``parameter`` does not match ``parameter_type``
            InvalidCastError: If a handler broke its return contract
            BaseException: ``error`` itself, unchanged, when nothing handled it
        """
        if error is None:
            raise invalid_argument("error")
        if not isinstance(error, BaseException):
            raise invalid_argument("error", detail=f"expected an exception, got {error!r}")
        if (
            self.parameter_type is not None
            and parameter is not None
            and not isinstance(parameter, self.parameter_type)
        ):
            raise invalid_argument(
                "parameter",
                detail=(
                    f"expected {getattr(self.parameter_type, '__name__', self.parameter_type)}, "
                    f"got {type(parameter).__name__}"
                ),
            )
        if throw_if_not_handled is None:
            throw_if_not_handled = self.throw_if_not_handled

        handling_input: HandlingInput[TParameter] = HandlingInput(error, parameter)
        error_type = type(error).__name__

        for index, entry in enumerate(self.entries):
            if not entry.matches(error):
                continue
            if not entry.applies(error, handling_input):
                self._logger.debug(
                    "Entry skipped by condition",
                    event="entry_skipped",
                    error_type=error_type,
                    entry_index=index,
                )
                continue

            outcome = entry.invoke(error, handling_input)
            if outcome.handled:
                self._check_result_type(outcome, entry)
                self._logger.debug(
                    "Error handled",
                    event="error_handled",
                    error_type=error_type,
                    entry_index=index,
                    entry_type=entry.error_type_name,
                )
                return outcome

            self._logger.debug(
                "Entry declined error",
                event="entry_skipped",
                error_type=error_type,
                entry_index=index,
            )

        self._logger.debug(
            "Error not handled",
            event="error_not_handled",
            error_type=error_type,
            entry_count=len(self._entries),
            rethrow=throw_if_not_handled,
        )
        if throw_if_not_handled:
            raise error
        return HandlingResult(False)

    def _register(
        self,
        error_type: ErrorType,
        handler: Callable[..., Any],
        condition: Callable[..., Any] | None,
        shape: HandlerShape,
    ) -> "HandlingConfiguration[TParameter, TResult]":
        validate_callable(handler, "handler")
        validate_callable(condition, "condition", required=False)
        validate_error_type(error_type)

        entry = HandlerEntry(
            error_type=error_type,
            handler=handler,
            shape=shape,
            condition=condition,
        )
        self._entries.append(entry)

        self._logger.debug(
            "Handler registered",
            event="entry_registered",
            entry_index=len(self._entries) - 1,
            entry_type=entry.error_type_name,
            shape=shape.value,
            conditional=condition is not None,
        )
        return self

    def _check_result_type(self, outcome: HandlingResult[Any], entry: HandlerEntry) -> None:
        if self.result_type is None or outcome.result is None:
            return
        if not isinstance(outcome.result, self.result_type):
            raise invalid_cast(
                outcome.result,
                self.result_type,
                detail=f"handler registered for {entry.error_type_name} produced a wrong result type",
            )

"""Unit tests for HandlerEntry."""

import dataclasses

import pytest

from simple_handling.errors import InvalidCastError
from simple_handling.handling import HandlerEntry, HandlingInput, HandlingResult, normalize_outcome
from simple_handling.types import HandlerShape

from tests.mocks.errors import ArgumentError, ArgumentNullError


class TestHandlerEntry:
    """Tests for matching, conditions and invocation."""

    def test_matches_subclasses(self):
        """Test matches() uses isinstance."""
        entry = HandlerEntry(ArgumentError, lambda ex: None)
        assert entry.matches(ArgumentNullError())
        assert not entry.matches(ValueError())

    def test_applies_without_condition(self):
        """Test an entry without a condition always applies."""
        entry = HandlerEntry(KeyError, lambda ex: None)
        error = KeyError()
        assert entry.applies(error, HandlingInput(error))

    def test_applies_false_when_condition_fails(self):
        """Test a false condition stops the entry before the handler runs."""
        calls = []
        entry = HandlerEntry(KeyError, calls.append, condition=lambda ex: False)
        error = KeyError()
        assert not entry.applies(error, HandlingInput(error))
        assert calls == []

    def test_invoke_runs_handler(self):
        """Test invoke() runs the handler and normalizes the outcome."""
        entry = HandlerEntry(KeyError, lambda ex: True)
        error = KeyError()
        assert entry.invoke(error, HandlingInput(error)) == HandlingResult(True)

    def test_input_shape_passes_input_to_condition_and_handler(self):
        """Test input entries pass the HandlingInput to condition and handler."""
        entry = HandlerEntry(
            KeyError,
            lambda ex, i: HandlingResult.of(i.parameter),
            shape=HandlerShape.ACTION_WITH_INPUT,
            condition=lambda ex, i: i.parameter == "go",
        )
        error = KeyError()
        assert not entry.applies(error, HandlingInput(error, "stop"))
        assert entry.applies(error, HandlingInput(error, "go"))
        assert entry.invoke(error, HandlingInput(error, "go")).result == "go"

    def test_error_type_name(self):
        """Test error_type_name for single and tuple types."""
        assert HandlerEntry(KeyError, print).error_type_name == "KeyError"
        assert HandlerEntry((KeyError, OSError), print).error_type_name == "(KeyError, OSError)"

    def test_is_immutable(self):
        """Test entries cannot be modified after creation."""
        entry = HandlerEntry(KeyError, print)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.error_type = ValueError


class TestNormalizeOutcome:
    """Tests for normalize_outcome()."""

    @pytest.fixture
    def entry(self) -> HandlerEntry:
        return HandlerEntry(KeyError, print)

    def test_none(self, entry):
        assert normalize_outcome(None, entry) == HandlingResult(True)

    def test_booleans(self, entry):
        assert normalize_outcome(True, entry).handled is True
        assert normalize_outcome(False, entry).handled is False

    def test_result_passthrough(self, entry):
        result = HandlingResult(True, "x")
        assert normalize_outcome(result, entry) is result

    def test_other_values_rejected(self, entry):
        with pytest.raises(InvalidCastError) as exc_info:
            normalize_outcome(0, entry)
        assert "KeyError" in exc_info.value.detail

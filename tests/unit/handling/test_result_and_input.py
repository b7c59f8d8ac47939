"""Unit tests for HandlingResult, HandlingInput and narrowing accessors."""

import dataclasses

import pytest

from simple_handling.errors import InvalidArgumentError, InvalidCastError
from simple_handling.handling import (
    HandlingInput,
    HandlingResult,
    get_parameter,
    get_result,
    narrow,
)


class TestHandlingResult:
    """Tests for HandlingResult."""

    def test_defaults_to_handled_without_payload(self):
        """Test HandlingResult() is handled with no result."""
        result = HandlingResult()
        assert result.handled is True
        assert result.result is None

    def test_not_handled_helper(self):
        """Test not_handled() builds an empty declined result."""
        result = HandlingResult.not_handled()
        assert result.handled is False
        assert result.result is None

    def test_of_helper(self):
        """Test of() builds a handled result with payload."""
        assert HandlingResult.of("x") == HandlingResult(True, "x")

    def test_not_handled_cannot_carry_payload(self):
        """Test a declined result with a payload is rejected."""
        with pytest.raises(InvalidArgumentError):
            HandlingResult(False, "payload")

    def test_is_immutable(self):
        """Test results cannot be modified."""
        result = HandlingResult(True, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.handled = False

    def test_truthiness_follows_handled(self):
        """Test bool(result) is result.handled."""
        assert HandlingResult()
        assert not HandlingResult(False)

    def test_result_as_narrows(self):
        """Test result_as returns the payload when the type fits."""
        assert HandlingResult(True, "text").result_as(str) == "text"

    def test_result_as_rejects_wrong_type(self):
        """Test result_as raises InvalidCastError on mismatch."""
        with pytest.raises(InvalidCastError) as exc_info:
            HandlingResult(True, "text").result_as(int)
        assert exc_info.value.expected_type == "int"
        assert exc_info.value.actual_type == "str"

    def test_result_as_none_payload(self):
        """Test an absent payload narrows to None."""
        assert HandlingResult().result_as(int) is None


class TestHandlingInput:
    """Tests for HandlingInput."""

    def test_holds_error_and_parameter(self):
        """Test the error and parameter are exposed as given."""
        error = ValueError("v")
        handling_input = HandlingInput(error, {"id": 1})
        assert handling_input.error is error
        assert handling_input.parameter == {"id": 1}

    def test_parameter_optional(self):
        """Test the parameter defaults to None."""
        assert HandlingInput(ValueError()).parameter is None

    def test_is_immutable(self):
        """Test inputs cannot be modified."""
        handling_input = HandlingInput(ValueError(), 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            handling_input.parameter = 2

    def test_parameter_as(self):
        """Test parameter_as narrows or raises."""
        handling_input = HandlingInput(ValueError(), 987987)
        assert handling_input.parameter_as(int) == 987987
        with pytest.raises(InvalidCastError):
            handling_input.parameter_as(str)


class TestNarrowing:
    """Tests for narrow(), get_result() and get_parameter()."""

    def test_narrow_accepts_subclass_instances(self):
        """Test narrowing uses isinstance semantics."""
        assert narrow(True, int) is True

    def test_narrow_accepts_tuple_of_types(self):
        """Test a tuple of types is accepted."""
        assert narrow(3.5, (int, float)) == 3.5

    def test_narrow_rejects_non_type(self):
        """Test expected_type must be a class."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            narrow(1, "int")
        assert exc_info.value.argument == "expected_type"

    def test_invalid_cast_is_type_error(self):
        """Test InvalidCastError can be caught as TypeError."""
        with pytest.raises(TypeError):
            narrow("1", int)

    def test_get_result(self):
        """Test get_result reads the payload."""
        assert get_result(HandlingResult(True, [1, 2]), list) == [1, 2]

    def test_get_result_requires_result(self):
        """Test get_result(None, ...) raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            get_result(None, str)
        assert exc_info.value.argument == "result"

    def test_get_result_wrong_type(self):
        """Test get_result raises InvalidCastError on mismatch."""
        with pytest.raises(InvalidCastError):
            get_result(HandlingResult(True, 1), str)

    def test_get_parameter(self):
        """Test get_parameter reads the parameter."""
        assert get_parameter(HandlingInput(KeyError(), "p"), str) == "p"

    def test_get_parameter_requires_input(self):
        """Test get_parameter(None, ...) raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            get_parameter(None, str)
        assert exc_info.value.argument == "handling_input"

    def test_get_parameter_wrong_type(self):
        """Test get_parameter raises InvalidCastError on mismatch."""
        with pytest.raises(InvalidCastError):
            get_parameter(HandlingInput(KeyError(), "p"), int)

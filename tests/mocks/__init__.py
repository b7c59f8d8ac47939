"""Test doubles shared across the test suite."""

from .errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    CallRecorder,
    UnrelatedError,
)

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "CallRecorder",
    "UnrelatedError",
]

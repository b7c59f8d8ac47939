"""Shared types for simple_handling.

Import from here rather than submodules:
    from simple_handling.types import HandlerShape, LogLevel
"""

from .enums import HandlerShape, LogFormat, LogLevel

__all__ = [
    "HandlerShape",
    "LogFormat",
    "LogLevel",
]

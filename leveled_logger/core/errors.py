"""Exceptions raised by the logger system"""

from typing import Any


class LogError(Exception):
    """Base class for errors raised by leveled_logger."""


class UndefinedLevelError(LogError, ValueError):
    """Raised when a level is not one of the defined log levels."""

    def __init__(self, level: Any):
        self.level = level
        super().__init__(f"Undefined log level: {level!r}")

"""
Base logger interface

Every sink implements ``log``; the eight level methods delegate to it.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from leveled_logger.core.log_level import LogLevel


class BaseLogger(ABC):
    """
    Abstract base class for loggers.

    Subclasses implement :meth:`log`. The level methods call ``log`` with a
    fixed level, so a custom logger only needs a robust ``log``.

    Every method returns None on success and raises on failure. Loggers hold
    no locks: callers must serialize concurrent calls into a logger whose
    destination is not safe for concurrent writes.
    """

    @abstractmethod
    def log(self, level: LogLevel, message: str, context: Sequence[str] = ()) -> None:
        """
        Log a message at the given level.

        Args:
            level: Log level
            message: Primary message
            context: Ordered supplementary items, rendered after the message

        Raises:
            UndefinedLevelError: If level is not a defined log level
        """
        pass

    def emergency(self, message: str, context: Sequence[str] = ()) -> None:
        """
        Log emergency message.

        The system is unusable. A logger never exits the process itself;
        the caller decides what to do next.
        """
        self.log(LogLevel.EMERGENCY, message, context)

    def alert(self, message: str, context: Sequence[str] = ()) -> None:
        """Log alert message."""
        self.log(LogLevel.ALERT, message, context)

    def critical(self, message: str, context: Sequence[str] = ()) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, context)

    def error(self, message: str, context: Sequence[str] = ()) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, context)

    def warning(self, message: str, context: Sequence[str] = ()) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, context)

    def notice(self, message: str, context: Sequence[str] = ()) -> None:
        """Log notice message."""
        self.log(LogLevel.NOTICE, message, context)

    def informational(self, message: str, context: Sequence[str] = ()) -> None:
        """Log informational message."""
        self.log(LogLevel.INFORMATIONAL, message, context)

    def debug(self, message: str, context: Sequence[str] = ()) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, context)

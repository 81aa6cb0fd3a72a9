"""
Log level enumeration

Severity levels follow RFC 5424 (syslog), from EMERGENCY down to DEBUG.
"""

from enum import IntEnum
from typing import Any, Dict

from leveled_logger.core.errors import UndefinedLevelError


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Lower values are more severe. The numeric values match the syslog
    severity codes.
    """

    EMERGENCY = 0       # System is unusable
    ALERT = 1           # Action must be taken immediately
    CRITICAL = 2        # Critical conditions
    ERROR = 3           # Error conditions
    WARNING = 4         # Warning conditions
    NOTICE = 5          # Normal but significant condition
    INFORMATIONAL = 6   # Informational messages
    DEBUG = 7           # Debug-level messages

    def __str__(self) -> str:
        """Canonical name of the level."""
        return LEVEL_NAMES[self]

    @property
    def label(self) -> str:
        """Canonical display name, e.g. ``Informational``."""
        return LEVEL_NAMES[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            UndefinedLevelError: If level_str is not a level name
        """
        level = LEVEL_FROM_NAME.get(str(level_str).lower())
        if level is None:
            raise UndefinedLevelError(level_str)
        return level


# Mapping from log level to canonical names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.EMERGENCY: "Emergency",
    LogLevel.ALERT: "Alert",
    LogLevel.CRITICAL: "Critical",
    LogLevel.ERROR: "Error",
    LogLevel.WARNING: "Warning",
    LogLevel.NOTICE: "Notice",
    LogLevel.INFORMATIONAL: "Informational",
    LogLevel.DEBUG: "Debug",
}

# Reverse mapping, keyed by lowercase name
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v.lower(): k for k, v in LEVEL_NAMES.items()}


def level_name(level: Any) -> str:
    """
    Resolve a level value to its canonical name.

    Args:
        level: LogLevel member or plain integer

    Returns:
        Canonical level name

    Raises:
        UndefinedLevelError: If level is not one of the eight defined levels
    """
    if isinstance(level, bool):
        raise UndefinedLevelError(level)
    try:
        return LEVEL_NAMES[LogLevel(level)]
    except (ValueError, TypeError):
        raise UndefinedLevelError(level) from None

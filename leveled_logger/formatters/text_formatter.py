"""
Text formatter

Renders ``[<Level>] <message>, <context>, <context>...``
"""

from typing import Any, Optional, Sequence

from leveled_logger.core.log_entry import LogEntry, normalize_context
from leveled_logger.core.log_level import level_name
from leveled_logger.formatters.base_formatter import BaseFormatter

CONTEXT_SEPARATOR = ", "


def format_message(level: Any, message: str, context: Sequence[str] = ()) -> str:
    """
    Render a level, message and context items as one line.

    Args:
        level: Log level
        message: Primary message
        context: Items appended after the message, in order

    Returns:
        Formatted line without a trailing newline

    Raises:
        UndefinedLevelError: If level is not a defined log level

    Example:
        >>> format_message(LogLevel.DEBUG, "M", ["a", "b"])
        '[Debug] M, a, b'
    """
    parts = [f"[{level_name(level)}] {message}"]
    parts.extend(normalize_context(context))
    return CONTEXT_SEPARATOR.join(parts)


class TextFormatter(BaseFormatter):
    """
    Format log entries as plain text lines.

    Optionally prefixes each line with the entry's timestamp.
    """

    def __init__(self, timestamp_format: Optional[str] = None):
        """
        Initialize text formatter.

        Args:
            timestamp_format: strftime format for a timestamp prefix.
                              None disables the prefix.

        Example:
            # "[Error] disk full"
            formatter = TextFormatter()

            # "2024/01/23 01:23:23 [Error] disk full"
            formatter = TextFormatter("%Y/%m/%d %H:%M:%S")
        """
        self.timestamp_format = timestamp_format

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a text line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        line = format_message(entry.level, entry.message, entry.context)
        if self.timestamp_format:
            return f"{entry.timestamp.strftime(self.timestamp_format)} {line}"
        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(timestamp_format={self.timestamp_format!r})"

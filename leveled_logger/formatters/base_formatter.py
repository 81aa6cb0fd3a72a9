"""Formatter interface used by the writer loggers"""

from abc import ABC, abstractmethod
from leveled_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Turns a LogEntry into the line a writer logger emits.

    Implementations must resolve the entry's level before producing any
    output, so a writer never writes a line for an undefined level.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Render one log line, without the trailing newline.

        Raises:
            UndefinedLevelError: If entry.level is not one of the eight levels
        """

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)

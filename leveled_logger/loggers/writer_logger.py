"""Stream writer loggers"""

import io
import sys
from typing import IO, Any, Optional, Sequence

from leveled_logger.core.base_logger import BaseLogger
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import LogLevel
from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.text_formatter import TextFormatter

# Date and time prefix used by StdoutLogger, e.g. "2009/01/23 01:23:23"
STD_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class WriterLogger(BaseLogger):
    """Format each log call and write it as one line to a stream."""

    def __init__(
        self,
        stream: IO[Any],
        formatter: Optional[BaseFormatter] = None,
        encoding: str = "utf-8"
    ):
        """
        Initialize writer logger.

        Args:
            stream: Destination stream, text or binary
            formatter: Log formatter (default: TextFormatter without timestamp)
            encoding: Encoding used when the stream is binary
        """
        self.stream = stream
        self.formatter = formatter or TextFormatter()
        self.encoding = encoding

    def log(self, level: LogLevel, message: str, context: Sequence[str] = ()) -> None:
        """
        Format and write a log line.

        Nothing is written when formatting fails. Errors raised by the
        stream propagate unchanged.
        """
        entry = LogEntry(level=level, message=message, context=context)
        line = self.formatter.format(entry) + "\n"

        if isinstance(self.stream, (io.RawIOBase, io.BufferedIOBase)):
            self.stream.write(line.encode(self.encoding))
        else:
            self.stream.write(line)
        self.flush()

    def flush(self) -> None:
        """Flush stream."""
        if hasattr(self.stream, "flush"):
            self.stream.flush()

    def close(self) -> None:
        """Flush and close the stream."""
        if getattr(self.stream, "closed", False):
            return
        self.flush()
        if hasattr(self.stream, "close"):
            self.stream.close()

    def __enter__(self) -> "WriterLogger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stream={self.stream!r}, formatter={self.formatter!r})"


class ConsoleLogger(WriterLogger):
    """
    Write log lines to a process stream (stdout or stderr).

    The process owns the stream, so closing the logger only flushes it.
    """

    def __init__(self, stream: Optional[IO[str]] = None, formatter: Optional[BaseFormatter] = None):
        """
        Initialize console logger.

        Args:
            stream: Output stream (default: sys.stdout as bound now)
            formatter: Log formatter (default: TextFormatter without timestamp)
        """
        super().__init__(sys.stdout if stream is None else stream, formatter=formatter)

    def close(self) -> None:
        """Flush only; the stream stays open."""
        self.flush()


class StdoutLogger(ConsoleLogger):
    """
    Default logger: writes timestamped lines to standard output.

    The stream is ``sys.stdout`` as bound at construction time.
    """

    def __init__(self, formatter: Optional[BaseFormatter] = None):
        """
        Initialize stdout logger.

        Args:
            formatter: Log formatter (default: TextFormatter with a
                       ``%Y/%m/%d %H:%M:%S`` timestamp prefix)
        """
        super().__init__(
            sys.stdout,
            formatter=formatter or TextFormatter(STD_TIMESTAMP_FORMAT)
        )

"""
Main Logger class - fans each log call out to child loggers
"""

from __future__ import annotations
from typing import Iterable, Optional, Sequence, Tuple

from leveled_logger.core.base_logger import BaseLogger
from leveled_logger.core.log_entry import normalize_context
from leveled_logger.core.log_level import LogLevel
from leveled_logger.loggers.writer_logger import StdoutLogger


class Logger(BaseLogger):
    """
    Logger that distributes every call to an ordered list of loggers.

    Children are called one after another, in construction order, with
    identical arguments; the context is passed as a tuple. The first child
    that raises stops the dispatch: its exception propagates unchanged and
    the remaining children are not called. Callers that need every child attempted must wrap the children
    themselves.

    Example:
        logger = Logger([StdoutLogger(), FileLogger("app.log")])
        logger.error("disk full", ["device=/dev/sda1"])
    """

    def __init__(self, loggers: Optional[Iterable[BaseLogger]] = None):
        """
        Initialize logger.

        Args:
            loggers: Child loggers, in dispatch order. With none given a
                     single StdoutLogger is used.

        Raises:
            TypeError: If a child has no callable ``log``
        """
        loggers = tuple(loggers or ())
        if not loggers:
            loggers = (StdoutLogger(),)

        for child in loggers:
            if not callable(getattr(child, "log", None)):
                raise TypeError(f"logger must provide a log() method: {child!r}")

        self._loggers: Tuple[BaseLogger, ...] = loggers

    @property
    def loggers(self) -> Tuple[BaseLogger, ...]:
        """Child loggers in dispatch order."""
        return self._loggers

    def log(self, level: LogLevel, message: str, context: Sequence[str] = ()) -> None:
        """
        Log a message to every child, stopping at the first failure.

        Every child receives the same immutable tuple of context items.
        """
        context = normalize_context(context)
        for child in self._loggers:
            child.log(level, message, context)

    def flush(self) -> None:
        """Flush all child loggers."""
        for child in self._loggers:
            if hasattr(child, "flush"):
                child.flush()

    def close(self) -> None:
        """Close all child loggers."""
        for child in self._loggers:
            if hasattr(child, "close"):
                child.close()

    def __repr__(self) -> str:
        return f"Logger(loggers={list(self._loggers)!r})"

"""No-op logger"""

from typing import Sequence

from leveled_logger.core.base_logger import BaseLogger
from leveled_logger.core.log_level import LogLevel


class NilLogger(BaseLogger):
    """
    Logger that does nothing.

    Useful wherever a logger is required but no output is wanted, e.g. to
    silence a dependency in tests. Every call succeeds, whatever the level.
    """

    def log(self, level: LogLevel, message: str, context: Sequence[str] = ()) -> None:
        """Discard the message."""
        return None

    def __repr__(self) -> str:
        return "NilLogger()"

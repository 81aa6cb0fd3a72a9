"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence, Tuple


@dataclass(frozen=True)
class LogEntry:
    """
    A single log call: level, message and ordered context items.

    Entries live for one dispatch only. The level is not validated here;
    formatting is where an undefined level is rejected.
    """

    level: Any
    message: str
    context: Tuple[str, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Normalize message and context."""
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        object.__setattr__(self, "context", normalize_context(self.context))


def normalize_context(context: Sequence[str]) -> Tuple[str, ...]:
    """
    Convert a context sequence to a tuple of strings.

    A bare string counts as one item rather than a sequence of characters.
    """
    if context is None:
        return ()
    if isinstance(context, str):
        return (context,)
    return tuple(str(item) for item in context)

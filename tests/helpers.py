"""Mock loggers and streams shared by the tests"""

from typing import List, Sequence, Tuple

from leveled_logger import BaseLogger


class RecordingLogger(BaseLogger):
    """Mock logger that records every call."""

    def __init__(self):
        self.calls: List[Tuple[int, str, Sequence[str]]] = []

    def log(self, level, message, context=()):
        self.calls.append((level, message, context))


class FailingLogger(BaseLogger):
    """Mock logger that always raises the given exception."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    def log(self, level, message, context=()):
        self.calls += 1
        raise self.error


class BrokenStream:
    """Stream whose writes always fail."""

    def write(self, data):
        raise OSError("device full")

    def flush(self):
        pass

"""File logger"""

from pathlib import Path
from typing import Optional, Union

from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.loggers.writer_logger import WriterLogger


class FileLogger(WriterLogger):
    """Write log lines to a file owned by the logger."""

    def __init__(
        self,
        filepath: Union[str, Path],
        mode: str = "a",
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize file logger.

        Args:
            filepath: Path to log file (parent directories are created)
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: TextFormatter without timestamp)
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(
            open(self.filepath, mode, encoding=encoding),
            formatter=formatter,
            encoding=encoding
        )

    def __repr__(self) -> str:
        return f"FileLogger(filepath='{self.filepath}', mode='{self.mode}')"

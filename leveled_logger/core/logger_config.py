"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from leveled_logger.loggers.writer_logger import STD_TIMESTAMP_FORMAT

CONSOLE_STREAMS = ("stdout", "stderr")
FILE_MODES = ("a", "w")


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Consumed by LoggerBuilder to decide which loggers to create.
    """

    # Console settings
    console_output: bool = True
    console_stream: str = "stdout"

    # Format settings
    include_timestamp: bool = False
    timestamp_format: str = STD_TIMESTAMP_FORMAT

    # File settings
    log_file: Optional[Path] = None
    file_mode: str = "a"
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Convert log_file to Path if it's a string
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        self.validate()

    def validate(self) -> None:
        """
        Check field values.

        Raises:
            ValueError: If a field holds an unsupported value
        """
        if self.console_stream not in CONSOLE_STREAMS:
            raise ValueError(f"console_stream must be one of {CONSOLE_STREAMS}")
        if self.file_mode not in FILE_MODES:
            raise ValueError(f"file_mode must be one of {FILE_MODES}")
        if self.include_timestamp and not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty when timestamps are enabled")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            console_output=True,
            console_stream="stderr",
            include_timestamp=True,
        )

    @classmethod
    def quiet_config(cls) -> "LoggerConfig":
        """Create configuration with no console output."""
        return cls(console_output=False)

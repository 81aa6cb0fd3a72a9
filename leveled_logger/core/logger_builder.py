"""Logger builder pattern"""

import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Union

from leveled_logger.core.base_logger import BaseLogger
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.formatters.text_formatter import TextFormatter
from leveled_logger.loggers.file_logger import FileLogger
from leveled_logger.loggers.nil_logger import NilLogger
from leveled_logger.loggers.writer_logger import ConsoleLogger


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = replace(config) if config else LoggerConfig.default()
        self._custom_loggers: List[BaseLogger] = []

    def with_console(self, stream: str = "stdout", timestamps: bool = False) -> "LoggerBuilder":
        """Enable console output on stdout or stderr."""
        self._update(
            console_output=True,
            console_stream=stream,
            include_timestamp=timestamps or self._config.include_timestamp
        )
        return self

    def without_console(self) -> "LoggerBuilder":
        """Disable console output."""
        self._update(console_output=False)
        return self

    def with_timestamps(self, timestamp_format: Optional[str] = None) -> "LoggerBuilder":
        """Prefix console and file lines with a timestamp."""
        self._update(
            include_timestamp=True,
            timestamp_format=timestamp_format or self._config.timestamp_format
        )
        return self

    def with_file(self, filepath: Union[str, Path], mode: str = "a") -> "LoggerBuilder":
        """Enable file output."""
        self._update(log_file=Path(filepath), file_mode=mode)
        return self

    def add_logger(self, logger: BaseLogger) -> "LoggerBuilder":
        """
        Add a custom logger.

        Custom loggers are dispatched after the console and file loggers,
        in the order they were added.

        Args:
            logger: Logger instance

        Returns:
            Self for method chaining
        """
        self._custom_loggers.append(logger)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        loggers: List[BaseLogger] = []

        if self._config.console_output:
            stream = sys.stderr if self._config.console_stream == "stderr" else sys.stdout
            loggers.append(ConsoleLogger(stream, formatter=self._formatter()))

        if self._config.log_file:
            loggers.append(FileLogger(
                self._config.log_file,
                mode=self._config.file_mode,
                encoding=self._config.encoding,
                formatter=self._formatter()
            ))

        loggers.extend(self._custom_loggers)

        # Nothing configured: stay silent rather than fall back to stdout
        if not loggers:
            loggers.append(NilLogger())

        return Logger(loggers)

    def _formatter(self) -> TextFormatter:
        if self._config.include_timestamp:
            return TextFormatter(self._config.timestamp_format)
        return TextFormatter()

    def _update(self, **changes) -> None:
        # replace() re-runs __post_init__ validation
        self._config = replace(self._config, **changes)

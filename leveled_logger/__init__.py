"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Leveled Logger - RFC 5424 severity logging with fan-out to multiple loggers
"""

__version__ = "1.0.0"

from leveled_logger.core.errors import LogError, UndefinedLevelError
from leveled_logger.core.log_level import LogLevel, level_name
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.base_logger import BaseLogger
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_builder import LoggerBuilder
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.loggers import NilLogger, WriterLogger, ConsoleLogger, StdoutLogger, FileLogger

# Import submodules (not all classes by default)
from leveled_logger import formatters

__all__ = [
    "LogError",
    "UndefinedLevelError",
    "LogLevel",
    "level_name",
    "LogEntry",
    "BaseLogger",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "NilLogger",
    "WriterLogger",
    "ConsoleLogger",
    "StdoutLogger",
    "FileLogger",
    "formatters",
]

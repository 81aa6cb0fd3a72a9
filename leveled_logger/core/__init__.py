"""
Core module for logger system

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- LogEntry: Log entry data structure
- BaseLogger: Interface implemented by every logger
- Logger: Fan-out logger
- LoggerBuilder: Builder pattern for logger construction
- LoggerConfig: Configuration management
"""

from leveled_logger.core.errors import LogError, UndefinedLevelError
from leveled_logger.core.log_level import LogLevel, level_name
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.base_logger import BaseLogger
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "LogError",
    "UndefinedLevelError",
    "LogLevel",
    "level_name",
    "LogEntry",
    "BaseLogger",
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
]

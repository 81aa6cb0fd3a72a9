"""Loggers module - Log output sinks"""

from leveled_logger.loggers.nil_logger import NilLogger
from leveled_logger.loggers.writer_logger import WriterLogger, ConsoleLogger, StdoutLogger
from leveled_logger.loggers.file_logger import FileLogger

__all__ = ["NilLogger", "WriterLogger", "ConsoleLogger", "StdoutLogger", "FileLogger"]

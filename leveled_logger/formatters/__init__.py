"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.text_formatter import TextFormatter, format_message

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "format_message",
]

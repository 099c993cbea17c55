"""
Log formatters module

Provides formatter implementations for controlling sink output format.
"""

from facility_logger.formatters.base_formatter import BaseFormatter
from facility_logger.formatters.text_formatter import TextFormatter
from facility_logger.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
]

"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Facility Logger - A logging facade with pluggable sinks and facility filters
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from facility_logger.core.exceptions import FilterSyntaxError
from facility_logger.core.facility import LoggerFacility
from facility_logger.core.logger import Logger
from facility_logger.core.log_record import LogRecord
from facility_logger.core.log_level import LogLevel
from facility_logger.core.logger_config import LoggerConfig
from facility_logger.core.sink import Sink
from facility_logger.sinks import (
    BaseSink,
    ConsoleSink,
    FileSink,
    GraylogSink,
    JsonFileSink,
    MemorySink,
)

# Import submodules (not all classes by default)
from facility_logger import filters
from facility_logger import formatters
from facility_logger import sinks

__all__ = [
    "FilterSyntaxError",
    "Logger",
    "LoggerFacility",
    "LogRecord",
    "LogLevel",
    "LoggerConfig",
    "Sink",
    "BaseSink",
    "ConsoleSink",
    "FileSink",
    "GraylogSink",
    "JsonFileSink",
    "MemorySink",
    "filters",
    "formatters",
    "sinks",
]

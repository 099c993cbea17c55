"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Logging facade routing messages to sinks
- LoggerFacility: Named handle logging through a Logger
- LogRecord: Per-message data handed to sinks
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- Sink: Capability interface every sink implements
"""

from facility_logger.core.exceptions import FilterSyntaxError
from facility_logger.core.facility import LoggerFacility
from facility_logger.core.logger import Logger
from facility_logger.core.log_record import LogRecord
from facility_logger.core.log_level import LogLevel
from facility_logger.core.logger_config import LoggerConfig
from facility_logger.core.sink import Sink

__all__ = [
    "FilterSyntaxError",
    "Logger",
    "LoggerFacility",
    "LogRecord",
    "LogLevel",
    "LoggerConfig",
    "Sink",
]

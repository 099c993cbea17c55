"""Sinks module - Log output destinations"""

from facility_logger.sinks.base_sink import BaseSink
from facility_logger.sinks.console_sink import ConsoleSink
from facility_logger.sinks.file_sink import FileSink
from facility_logger.sinks.json_file_sink import JsonFileSink
from facility_logger.sinks.graylog_sink import GraylogSink, GraylogStats
from facility_logger.sinks.memory_sink import MemorySink

__all__ = [
    "BaseSink",
    "ConsoleSink",
    "FileSink",
    "JsonFileSink",
    "GraylogSink",
    "GraylogStats",
    "MemorySink",
]

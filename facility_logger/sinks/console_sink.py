"""Console sink with ANSI colors"""

import sys
from typing import Any, Optional

from facility_logger.core.log_level import LogLevel
from facility_logger.core.log_record import LogRecord
from facility_logger.formatters.base_formatter import BaseFormatter
from facility_logger.formatters.text_formatter import TextFormatter
from facility_logger.sinks.base_sink import BaseSink


class ConsoleSink(BaseSink):
    """Write logs to console with optional colors."""

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        colorize: bool = True,
        timestamp: bool = True,
        stream=None,
        formatter: Optional[BaseFormatter] = None,
        **options: Any,
    ):
        """
        Initialize console sink.

        Args:
            level: Minimum level this sink records
            colorize: Wrap lines in ANSI color codes
            timestamp: Prefix lines with a timestamp
            stream: Output stream (default: sys.stderr)
            formatter: Log formatter (default: TextFormatter)
        """
        self.colorize = colorize
        self.stream = stream or sys.stderr
        super().__init__(level=level, timestamp=timestamp, formatter=formatter, **options)

    def _default_formatter(self) -> BaseFormatter:
        return TextFormatter(timestamp=self.timestamp)

    def _write(self, record: LogRecord) -> None:
        """Write log record to console."""
        msg = self.formatter.format(record)

        if self.colorize:
            msg = f"{record.level.color_code}{msg}{record.level.reset_code}"

        self.stream.write(msg + "\n")
        self.stream.flush()

    def close(self) -> None:
        """Flush stream. The stream itself is left open."""
        self.stream.flush()

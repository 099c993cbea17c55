"""File sink"""

import threading
from pathlib import Path
from typing import Any, Optional

from facility_logger.core.log_level import LogLevel
from facility_logger.core.log_record import LogRecord
from facility_logger.formatters.base_formatter import BaseFormatter
from facility_logger.formatters.text_formatter import TextFormatter
from facility_logger.sinks.base_sink import BaseSink


class FileSink(BaseSink):
    """Append log lines to a text file."""

    def __init__(
        self,
        filename: str,
        level: LogLevel = LogLevel.DEBUG,
        timestamp: bool = True,
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None,
        **options: Any,
    ):
        """
        Initialize file sink.

        Args:
            filename: Path to log file. Parent directories are created.
            level: Minimum level this sink records
            timestamp: Prefix lines with a timestamp
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: TextFormatter)
        """
        super().__init__(level=level, timestamp=timestamp, formatter=formatter, **options)
        self.filepath = Path(filename)
        self.encoding = encoding
        self._lock = threading.Lock()
        self._file = None
        self._open()

    def _default_formatter(self) -> BaseFormatter:
        return TextFormatter(timestamp=self.timestamp)

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, "a", encoding=self.encoding)

    def _write(self, record: LogRecord) -> None:
        """Write log record to file."""
        msg = self.formatter.format(record)
        with self._lock:
            if self._file:
                self._file.write(msg + "\n")
                self._file.flush()

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        """String representation."""
        return f"FileSink(filename='{self.filepath}', level={self._level})"

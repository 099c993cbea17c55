"""
JSON file sink

Writes records as a JSON array so the file parses as one document once
the sink is closed::

    [
    {"timestamp": "...", "level": "INFO", "facility": "db", ...},
    {"timestamp": "...", "level": "WARN", "facility": null, ...}
    ]
"""

import threading
from pathlib import Path
from typing import Any, Optional

from facility_logger.core.log_level import LogLevel
from facility_logger.core.log_record import LogRecord
from facility_logger.formatters.base_formatter import BaseFormatter
from facility_logger.formatters.json_formatter import JSONFormatter
from facility_logger.sinks.base_sink import BaseSink


class JsonFileSink(BaseSink):
    """Write log records to a file as a JSON array."""

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
        Initialize JSON file sink.

        The file is truncated on open; each sink instance owns one document.

        Args:
            filename: Path to output file. Parent directories are created.
            level: Minimum level this sink records
            timestamp: Include timestamps in records
            encoding: File encoding (default: 'utf-8')
            formatter: Must produce one JSON value per record
                (default: compact JSONFormatter)
        """
        super().__init__(level=level, timestamp=timestamp, formatter=formatter, **options)
        self.filepath = Path(filename)
        self.encoding = encoding
        self._lock = threading.Lock()
        self._file = None
        self._count = 0
        self._open()

    def _default_formatter(self) -> BaseFormatter:
        return JSONFormatter(timestamp=self.timestamp)

    def _open(self):
        """Open output file and start the array."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, "w", encoding=self.encoding)
        self._file.write("[\n")
        self._file.flush()

    def _write(self, record: LogRecord) -> None:
        """Append log record to the array."""
        item = self.formatter.format(record)
        with self._lock:
            if not self._file:
                return
            if self._count:
                self._file.write(",\n")
            self._file.write(item)
            self._file.flush()
            self._count += 1

    def close(self):
        """Terminate the array and close the file."""
        with self._lock:
            if self._file:
                self._file.write("\n]\n")
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        """String representation."""
        return f"JsonFileSink(filename='{self.filepath}', level={self._level})"

"""
Text formatter for single-line output

Used by the console and plain file sinks
"""

from facility_logger.core.log_record import LogRecord
from facility_logger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log records as one line of text.

    Output looks like::

        2024-05-01 12:34:56.789 WARN      (db) slow query {'duration_ms': 812}
    """

    def __init__(
        self,
        timestamp: bool = True,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f",
        include_meta: bool = True,
    ):
        """
        Initialize text formatter.

        Args:
            timestamp: Prefix lines with the record timestamp
            timestamp_format: strftime format for timestamps
            include_meta: Append metadata mapping when it is not empty
        """
        self.timestamp = timestamp
        self.timestamp_format = timestamp_format
        self.include_meta = include_meta

    def format(self, record: LogRecord) -> str:
        """
        Format log record as text.

        Args:
            record: Log record to format

        Returns:
            Formatted line without trailing newline
        """
        parts = []

        if self.timestamp:
            # Trim microseconds to milliseconds
            stamp = record.timestamp.strftime(self.timestamp_format)
            if self.timestamp_format.endswith("%f"):
                stamp = stamp[:-3]
            parts.append(stamp)

        parts.append(record.level.label)

        if record.facility is not None:
            parts.append(f"({record.facility})")

        parts.append(record.message)

        if self.include_meta and record.meta:
            parts.append(repr(record.meta))

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(timestamp={self.timestamp}, meta={self.include_meta})"

"""
JSON formatter for structured logging

Formats log records as JSON objects
"""

import json
from typing import Any, Dict, Optional

from facility_logger.core.log_record import LogRecord
from facility_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log records as JSON objects.

    Metadata values that are not JSON serializable are rendered with
    ``str`` so that one odd value never loses the whole record.
    """

    def __init__(
        self,
        timestamp: bool = True,
        indent: Optional[int] = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            timestamp: Include the ISO-8601 timestamp
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.timestamp = timestamp
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def to_dict(self, record: LogRecord) -> Dict[str, Any]:
        """Build the mapping that format() serializes."""
        log_dict = record.to_dict()
        if not self.timestamp:
            del log_dict["timestamp"]
        return log_dict

    def format(self, record: LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        return json.dumps(
            self.to_dict(record),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"

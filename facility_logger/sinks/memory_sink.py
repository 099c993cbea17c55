"""In-memory sink, mostly useful for tests and diagnostics"""

import threading
from collections import deque
from typing import Any, Deque, Dict, List

from facility_logger.core.log_level import LogLevel
from facility_logger.core.log_record import LogRecord
from facility_logger.sinks.base_sink import BaseSink


class MemorySink(BaseSink):
    """
    Keep log messages in memory.

    Example:
        sink = logger.to_memory(limit=100)
        logger.facility("db").info("connected")
        sink.get_messages()[-1]["message"]  # "connected"
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        limit: int = 0,
        **options: Any,
    ):
        """
        Initialize memory sink.

        Args:
            level: Minimum level this sink records
            limit: Maximum number of retained messages, oldest dropped
                first. 0 keeps everything.
        """
        if limit < 0:
            raise ValueError("limit cannot be negative")

        super().__init__(level=level, **options)
        self.limit = limit
        self._lock = threading.Lock()
        self._messages: Deque[Dict[str, Any]] = deque(maxlen=limit or None)

    def _write(self, record: LogRecord) -> None:
        """Store log record as a message dictionary."""
        message = {
            "timestamp": record.timestamp,
            "level": record.level,
            "facility": record.facility,
            "message": record.message,
            "meta": record.meta,
        }
        with self._lock:
            self._messages.append(message)

    def get_messages(self) -> List[Dict[str, Any]]:
        """
        Get stored messages, oldest first.

        Returns:
            List of dictionaries with timestamp, level, facility, message
            and meta keys
        """
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        """Drop all stored messages."""
        with self._lock:
            self._messages.clear()

"""
Base sink implementation

Shared plumbing for the bundled sinks: sink-local level gate, record
construction and formatter selection.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from facility_logger.core.log_level import LogLevel
from facility_logger.core.log_record import LogRecord
from facility_logger.formatters.base_formatter import BaseFormatter


class BaseSink(ABC):
    """
    Base class for bundled sinks.

    Subclasses implement ``_write(record)``; ``log`` drops messages below
    the sink's own level before a record is built. Unrecognized keyword
    options are accepted and ignored so that one options mapping can be
    shared across sinks.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        timestamp: bool = True,
        formatter: Optional[BaseFormatter] = None,
        **_options: Any,
    ):
        """
        Initialize sink.

        Args:
            level: Minimum level this sink records
            timestamp: Include timestamps in the output
            formatter: Formatter override (default: sink specific)
        """
        self._level = LogLevel.coerce(level)
        self.timestamp = timestamp
        self.formatter = formatter or self._default_formatter()

    def _default_formatter(self) -> Optional[BaseFormatter]:
        """Formatter used when none is given."""
        return None

    def set_level(self, level: LogLevel) -> None:
        """Set minimum level for this sink."""
        self._level = LogLevel.coerce(level)

    def get_level(self) -> LogLevel:
        """Get minimum level for this sink."""
        return self._level

    def log(
        self,
        level: LogLevel,
        facility: Optional[str],
        args: List[Any],
        meta: Dict[str, Any],
    ) -> None:
        """Record one message if it passes the sink level."""
        if level < self._level:
            return

        record = LogRecord(
            level=level,
            facility=facility,
            args=list(args),
            meta=dict(meta),
        )
        self._write(record)

    @abstractmethod
    def _write(self, record: LogRecord) -> None:
        """
        Write a record that passed the level gate.

        Args:
            record: Log record to write
        """
        pass

    def close(self) -> None:
        """Release resources. Default does nothing."""
        pass

    def __enter__(self) -> "BaseSink":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(level={self._level})"

"""
Log record data structure

One record is built per accepted log call and handed to a sink; the
logger itself never keeps it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from facility_logger.core.log_level import LogLevel


def format_args(args: Sequence[Any]) -> str:
    """
    Render log call arguments as a single message string.

    Strings are used as-is, exceptions as ``Type: message`` and anything
    else through ``repr``. Parts are joined by a single space.
    """
    parts = []
    for arg in args:
        if isinstance(arg, str):
            parts.append(arg)
        elif isinstance(arg, BaseException):
            parts.append(f"{type(arg).__name__}: {arg}")
        else:
            parts.append(repr(arg))
    return " ".join(parts)


@dataclass
class LogRecord:
    """
    Log record data structure.

    Contains everything a sink needs to render a single message.
    """

    level: LogLevel
    facility: Optional[str] = None
    args: List[Any] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, LogLevel):
            self.level = LogLevel(self.level)

    @property
    def message(self) -> str:
        """Arguments rendered as one string."""
        return format_args(self.args)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "facility": self.facility,
            "message": self.message,
            "meta": dict(self.meta),
        }

    def __str__(self) -> str:
        """String representation."""
        facility = f" ({self.facility})" if self.facility else ""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"{self.level.label}{facility} {self.message}"
        )

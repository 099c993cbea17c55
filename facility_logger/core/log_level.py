"""
Log level enumeration

Syslog-derived severity ladder shared by the logger and every sink.
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered from least to most severe. Used both as the severity of a
    message and as a minimum-level threshold.
    """

    DEBUG = 1       # Debug information
    INFO = 2        # Informational messages
    NOTICE = 3      # Normal but significant conditions
    WARN = 4        # Warning messages
    ERROR = 5       # Error conditions
    CRITICAL = 6    # Critical conditions
    ALERT = 7       # Action must be taken immediately
    EMERGENCY = 8   # System is unusable

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in LEVEL_ALIASES:
            return LEVEL_ALIASES[key]
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        """Accept a LogLevel, its integer value or its name."""
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)

    @property
    def syslog_severity(self) -> int:
        """Syslog severity number (EMERGENCY=0 ... DEBUG=7)."""
        return LogLevel.EMERGENCY - self

    @property
    def label(self) -> str:
        """Level name padded for column-aligned output."""
        return f"{self.name:9}"

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return LEVEL_COLORS.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\033[36m",         # Cyan
    LogLevel.INFO: "\033[37m",          # White
    LogLevel.NOTICE: "\033[32m",        # Green
    LogLevel.WARN: "\033[33m",          # Yellow
    LogLevel.ERROR: "\033[31m",         # Red
    LogLevel.CRITICAL: "\033[35m",      # Magenta
    LogLevel.ALERT: "\033[1;35m",       # Bold magenta
    LogLevel.EMERGENCY: "\033[1;41m",   # Bold on red
}

# Alternative spellings accepted by from_string
LEVEL_ALIASES: Dict[str, LogLevel] = {
    "WARNING": LogLevel.WARN,
    "CRIT": LogLevel.CRITICAL,
    "EMERG": LogLevel.EMERGENCY,
    "PANIC": LogLevel.EMERGENCY,
}

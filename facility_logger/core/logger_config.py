"""
Logger configuration management
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional, Union

from facility_logger.core.log_level import LogLevel

SinkErrorHandler = Callable[[str, Exception], None]


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Attributes:
        name: Logger name, used in diagnostics
        level: Minimum severity accepted by the logger
        filter: Facility filter expression (see facility_logger.filters)
        on_sink_error: Called with (sink_id, exception) when a sink fails.
            None reports the failure on stderr.
    """

    name: str = "logger"
    level: Union[LogLevel, str] = LogLevel.DEBUG
    filter: str = ""
    on_sink_error: Optional[SinkErrorHandler] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.level = LogLevel.coerce(self.level)

        if self.filter is None:
            self.filter = ""

        if self.on_sink_error is not None and not callable(self.on_sink_error):
            raise TypeError("on_sink_error must be callable")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(level=LogLevel.WARN)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a plain mapping.

        Unrecognized keys are ignored.

        Args:
            data: Mapping with configuration values

        Returns:
            New LoggerConfig instance
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

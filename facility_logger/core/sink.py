"""
Sink capability interface

Any object providing these four methods can be registered with a Logger.
Concrete sinks are free to share code through BaseSink, but the logger
only relies on this protocol.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from facility_logger.core.log_level import LogLevel


@runtime_checkable
class Sink(Protocol):
    """Destination for log messages."""

    def log(
        self,
        level: LogLevel,
        facility: Optional[str],
        args: List[Any],
        meta: Dict[str, Any],
    ) -> None:
        """
        Record one message.

        The sink applies its own minimum level; the logger does not
        pre-filter by it.
        """
        ...

    def close(self) -> None:
        """Release held resources. May be called more than once."""
        ...

    def set_level(self, level: LogLevel) -> None:
        ...

    def get_level(self) -> LogLevel:
        ...

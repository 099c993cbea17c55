"""
Facility handles

A facility is a named source of messages. Handles are created and owned
by a Logger and only keep a weak reference back to it.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from facility_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from facility_logger.core.logger import Logger


class LevelMethodsMixin(ABC):
    """Severity shortcuts on top of a ``log(level, *args, **meta)`` method."""

    @abstractmethod
    def log(self, level: LogLevel, *args: Any, **meta: Any) -> None:
        """
        Log a message at the given level.

        Args:
            level: Message severity
            *args: Message arguments
            **meta: Metadata mapping
        """
        pass

    def debug(self, *args: Any, **meta: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, *args, **meta)

    def info(self, *args: Any, **meta: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *args, **meta)

    def notice(self, *args: Any, **meta: Any) -> None:
        """Log notice message."""
        self.log(LogLevel.NOTICE, *args, **meta)

    def warn(self, *args: Any, **meta: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, *args, **meta)

    def error(self, *args: Any, **meta: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, *args, **meta)

    def crit(self, *args: Any, **meta: Any) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, *args, **meta)

    def alert(self, *args: Any, **meta: Any) -> None:
        """Log alert message."""
        self.log(LogLevel.ALERT, *args, **meta)

    def emerg(self, *args: Any, **meta: Any) -> None:
        """Log emergency message."""
        self.log(LogLevel.EMERGENCY, *args, **meta)

    panic = emerg


class LoggerFacility(LevelMethodsMixin):
    """
    Named handle that logs through its owning Logger.

    Obtain instances with ``Logger.facility(name)`` rather than
    constructing them directly.

    Example:
        db = logger.facility("db")
        db.warn("slow query", duration_ms=812)
    """

    def __init__(self, name: str, logger: "Logger"):
        self._name = name
        self._logger_ref = weakref.ref(logger)

    @property
    def name(self) -> str:
        return self._name

    @property
    def logger(self) -> "Logger":
        """
        Owning logger.

        Raises:
            ReferenceError: If the logger no longer exists
        """
        logger = self._logger_ref()
        if logger is None:
            raise ReferenceError(
                f"Logger owning facility '{self._name}' no longer exists"
            )
        return logger

    def log(self, level: LogLevel, *args: Any, **meta: Any) -> None:
        """Log a message under this facility."""
        self.logger.dispatch(level, self._name, args, meta)

    def __repr__(self) -> str:
        """String representation."""
        return f"LoggerFacility(name={self._name!r})"

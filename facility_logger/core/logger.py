"""
Main Logger class - facility aware logging facade

Routes each message to every registered sink after a global level gate
and, for facility messages, the facility filter.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from facility_logger.core.facility import LevelMethodsMixin, LoggerFacility
from facility_logger.core.log_level import LogLevel
from facility_logger.core.logger_config import LoggerConfig
from facility_logger.core.sink import Sink
from facility_logger.filters.facility_filter import FacilityFilter, FilterRule
from facility_logger.sinks.console_sink import ConsoleSink
from facility_logger.sinks.file_sink import FileSink
from facility_logger.sinks.graylog_sink import GraylogSink
from facility_logger.sinks.json_file_sink import JsonFileSink
from facility_logger.sinks.memory_sink import MemorySink

CONSOLE_SINK_ID = "__console__"
GRAYLOG_SINK_ID = "__graylog__"
MEMORY_SINK_ID = "__memory__"


def report_sink_error(sink_id: str, error: Exception) -> None:
    """Default sink error handler: report on stderr."""
    print(f"Sink '{sink_id}' error: {error}", file=sys.stderr)


class Logger(LevelMethodsMixin):
    """
    Logging facade with named sinks and facilities.

    Thread Safety:
        Registry and filter changes are guarded by one lock. Messages are
        fanned out on a snapshot taken under that lock, so sinks run
        outside it.

    Example:
        logger = Logger(LoggerConfig(level=LogLevel.INFO, filter="-^http"))
        logger.to_console(colorize=True)

        db = logger.facility("db")
        db.warn("slow query", duration_ms=812)
        logger.close()
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._level = self._config.level
        self._filter = FacilityFilter(self._config.filter)
        self._on_sink_error = self._config.on_sink_error or report_sink_error
        self._sinks: Dict[str, Sink] = {}
        self._facilities: Dict[str, LoggerFacility] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._config.name

    # Level

    def set_level(self, level: LogLevel) -> None:
        """Set minimum level accepted by the logger."""
        with self._lock:
            self._level = LogLevel.coerce(level)

    def get_level(self) -> LogLevel:
        """Get minimum level accepted by the logger."""
        return self._level

    # Filters

    def set_filters(self, expression: Optional[str]) -> None:
        """
        Replace the facility filter.

        Args:
            expression: Filter expression, e.g. ``"db,-^db.pool"``.
                Empty or None allows every facility.

        Raises:
            FilterSyntaxError: If the expression is invalid. The current
                filter is kept in that case.
        """
        new_filter = FacilityFilter(expression)
        with self._lock:
            self._filter = new_filter

    def get_filters(self) -> Tuple[FilterRule, ...]:
        """Get active filter rules in expression order."""
        return self._filter.rules

    def get_filtered_facility_names(self) -> List[str]:
        """
        Get names of registered facilities that pass the current filter.

        Returns:
            Facility names in registration order
        """
        with self._lock:
            names = list(self._facilities)
            active = self._filter
        return active.filter_names(names)

    # Sinks

    def register_sink(self, sink_id: str, sink: Sink) -> None:
        """
        Register a sink under an id.

        A sink already registered under the same id is replaced (and not
        closed).

        Args:
            sink_id: Unique sink id
            sink: Object implementing the Sink protocol
        """
        with self._lock:
            self._sinks[sink_id] = sink

    def remove_sink(self, sink_id: str) -> Optional[Sink]:
        """
        Unregister a sink without closing it.

        Returns:
            The removed sink or None if not registered
        """
        with self._lock:
            return self._sinks.pop(sink_id, None)

    def get_sink(self, sink_id: str) -> Optional[Sink]:
        """
        Get a registered sink by id.

        Returns:
            Sink instance or None if not found
        """
        with self._lock:
            return self._sinks.get(sink_id)

    def get_all_sinks(self) -> Dict[str, Sink]:
        """Get all registered sinks keyed by id, in registration order."""
        with self._lock:
            return dict(self._sinks)

    def to_console(self, **options: Any) -> ConsoleSink:
        """
        Register a ConsoleSink under ``"__console__"``.

        Args:
            **options: ConsoleSink options (level, colorize, timestamp,
                stream). Unknown options are ignored.
        """
        sink = ConsoleSink(**options)
        self.register_sink(CONSOLE_SINK_ID, sink)
        return sink

    def to_file(self, filename: str, **options: Any) -> FileSink:
        """Register a FileSink under its filename."""
        sink = FileSink(filename, **options)
        self.register_sink(filename, sink)
        return sink

    def to_json_file(self, filename: str, **options: Any) -> JsonFileSink:
        """Register a JsonFileSink under its filename."""
        sink = JsonFileSink(filename, **options)
        self.register_sink(filename, sink)
        return sink

    def to_graylog(self, **options: Any) -> GraylogSink:
        """
        Register a GraylogSink under ``"__graylog__"``.

        Args:
            **options: GraylogSink options (level, graylog_hostname,
                graylog_port, host, ...). Unknown options are ignored.
        """
        sink = GraylogSink(**options)
        self.register_sink(GRAYLOG_SINK_ID, sink)
        return sink

    def to_memory(self, **options: Any) -> MemorySink:
        """Register a MemorySink under ``"__memory__"``."""
        sink = MemorySink(**options)
        self.register_sink(MEMORY_SINK_ID, sink)
        return sink

    # Facilities

    def facility(self, name: str) -> LoggerFacility:
        """
        Get or create the handle for a facility.

        Repeated calls with the same name return the same object. The
        filter is not consulted here, only when messages are logged.

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("Facility name must not be empty")

        with self._lock:
            handle = self._facilities.get(name)
            if handle is None:
                handle = LoggerFacility(name, self)
                self._facilities[name] = handle
            return handle

    def get_facility(self, name: str) -> Optional[LoggerFacility]:
        """Get an existing facility handle, or None."""
        with self._lock:
            return self._facilities.get(name)

    def get_all_facilities(self) -> Dict[str, LoggerFacility]:
        """Get all facility handles keyed by name, in registration order."""
        with self._lock:
            return dict(self._facilities)

    # Logging

    def dispatch(
        self,
        level: LogLevel,
        facility: Optional[str],
        args: Iterable[Any],
        meta: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Pass a message to every sink.

        Messages below the logger level, or from a facility rejected by the
        filter, are dropped silently. A failing sink is reported to the
        sink error handler and does not stop delivery to the others.

        Args:
            level: Message severity
            facility: Facility name, or None for logger-level messages
            args: Message arguments
            meta: Metadata mapping
        """
        with self._lock:
            if level < self._level:
                return
            if facility is not None and not self._filter.allows(facility):
                return
            sinks = list(self._sinks.items())

        args = list(args)
        meta = dict(meta or {})

        # Each sink gets its own copies
        for sink_id, sink in sinks:
            try:
                sink.log(level, facility, list(args), dict(meta))
            except Exception as e:
                self._on_sink_error(sink_id, e)

    def log(self, level: LogLevel, *args: Any, **meta: Any) -> None:
        """Log a message without a facility."""
        self.dispatch(level, None, args, meta)

    def close(self) -> None:
        """
        Close every registered sink, in registration order.

        Sinks stay registered, so calling close() again closes them again.
        """
        for sink_id, sink in self.get_all_sinks().items():
            try:
                sink.close()
            except Exception as e:
                self._on_sink_error(sink_id, e)

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Logger(name={self.name!r}, level={self._level}, "
            f"filter={self._filter.expression!r}, sinks={list(self._sinks)})"
        )

"""
Graylog sink for centralized logging

Sends records as GELF 1.1 messages over UDP. Delivery is fire-and-forget:
send failures are counted in the sink statistics and never raised to the
caller.
"""

from __future__ import annotations

import json
import math
import os
import re
import socket
import threading
import zlib
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from facility_logger.core.log_level import LogLevel
from facility_logger.core.log_record import LogRecord
from facility_logger.sinks.base_sink import BaseSink

GELF_CHUNK_MAGIC = b"\x1e\x0f"
GELF_MAX_CHUNKS = 128
GELF_CHUNK_HEADER_SIZE = 12
EMPTY_SHORT_MESSAGE = "-"

_INVALID_FIELD_CHARS = re.compile(r"[^\w.\-]", re.ASCII)


@dataclass
class GraylogStats:
    """
    Statistics for the Graylog transport.

    Tracks message counts and the most recent send error.
    """

    messages_sent: int = 0
    messages_failed: int = 0
    messages_dropped: int = 0
    chunks_sent: int = 0
    bytes_sent: int = 0
    last_error: Optional[str] = None
    last_error_time: Optional[datetime] = None

    def record_success(self, bytes_count: int, chunks: int) -> None:
        """Record a successfully sent message."""
        self.messages_sent += 1
        self.chunks_sent += chunks
        self.bytes_sent += bytes_count

    def record_failure(self, error: str) -> None:
        """Record a failed send."""
        self.messages_failed += 1
        self.last_error = error
        self.last_error_time = datetime.now()

    def record_drop(self) -> None:
        """Record a message too large to chunk."""
        self.messages_dropped += 1

    def to_dict(self) -> dict:
        """Convert stats to dictionary for serialization."""
        return {
            "messages_sent": self.messages_sent,
            "messages_failed": self.messages_failed,
            "messages_dropped": self.messages_dropped,
            "chunks_sent": self.chunks_sent,
            "bytes_sent": self.bytes_sent,
            "last_error": self.last_error,
            "last_error_time": (
                self.last_error_time.isoformat()
                if self.last_error_time
                else None
            ),
        }


def gelf_field_name(key: str) -> str:
    """
    Turn a metadata key into a GELF additional field name.

    Characters outside ``[\\w.-]`` become underscores and the reserved
    ``_id`` field is renamed to ``__id``.
    """
    name = "_" + _INVALID_FIELD_CHARS.sub("_", str(key).lstrip("_"))
    if name == "_id":
        name = "__id"
    return name


def gelf_field_value(value: Any) -> Any:
    """GELF fields only carry strings and numbers."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float, str)):
        return value
    if value is None:
        return "null"
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return str(value)


class GraylogSink(BaseSink):
    """
    GELF over UDP log sink.

    Features:
    - GELF 1.1 payloads with facility and metadata as additional fields
    - Optional zlib compression
    - Chunking for payloads larger than one datagram

    Note:
        UDP does not guarantee delivery or ordering.

    Thread Safety:
        This class is thread-safe. All socket access uses internal locking.

    Example:
        sink = GraylogSink(graylog_hostname="graylog.example.com")
        logger.register_sink("__graylog__", sink)
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        graylog_hostname: str = "localhost",
        graylog_port: int = 12201,
        host: Optional[str] = None,
        version: str = "1.1",
        additional_fields: Optional[Mapping[str, Any]] = None,
        compress: bool = True,
        chunk_size: int = 1420,
        **options: Any,
    ):
        """
        Initialize Graylog sink.

        Args:
            level: Minimum level this sink records
            graylog_hostname: Graylog server address
            graylog_port: Graylog GELF UDP input port
            host: Source host reported in messages (default: this machine)
            version: GELF version string
            additional_fields: Static fields added to every message
            compress: zlib-compress payloads
            chunk_size: Maximum datagram payload before chunking
        """
        if chunk_size <= GELF_CHUNK_HEADER_SIZE:
            raise ValueError(
                f"chunk_size must be larger than {GELF_CHUNK_HEADER_SIZE}"
            )

        super().__init__(level=level, **options)
        self.graylog_hostname = graylog_hostname
        self.graylog_port = graylog_port
        self.host = host or socket.gethostname()
        self.version = version
        self.additional_fields = dict(additional_fields or {})
        self.compress = compress
        self.chunk_size = chunk_size

        self._target = (graylog_hostname, graylog_port)
        self._socket: Optional[socket.socket] = None
        self._lock = threading.Lock()
        self._stats = GraylogStats()
        self._closed = False

    def build_message(self, record: LogRecord) -> Dict[str, Any]:
        """
        Build the GELF message for a record.

        Args:
            record: Log record

        Returns:
            GELF message dictionary
        """
        text = record.message
        lines = [line for line in text.splitlines() if line.strip()]

        # Graylog rejects an empty short_message
        message: Dict[str, Any] = {
            "version": self.version,
            "host": self.host,
            "short_message": lines[0] if lines else EMPTY_SHORT_MESSAGE,
            "timestamp": round(record.timestamp.timestamp(), 3),
            "level": record.level.syslog_severity,
        }
        if "\n" in text:
            message["full_message"] = text

        for key, value in self.additional_fields.items():
            message[gelf_field_name(key)] = gelf_field_value(value)
        for key, value in record.meta.items():
            message[gelf_field_name(key)] = gelf_field_value(value)

        if record.facility is not None:
            message["_facility"] = record.facility

        return message

    def encode(self, message: Dict[str, Any]) -> bytes:
        """Serialize (and optionally compress) a GELF message."""
        data = json.dumps(message, ensure_ascii=False).encode("utf-8")
        if self.compress:
            data = zlib.compress(data)
        return data

    def chunk(self, data: bytes) -> List[bytes]:
        """
        Split a payload into GELF chunks.

        Args:
            data: Encoded GELF payload

        Returns:
            Datagrams to send. A payload that fits in one datagram is
            returned unchanged; one needing more than 128 chunks yields an
            empty list.
        """
        if len(data) <= self.chunk_size:
            return [data]

        piece_size = self.chunk_size - GELF_CHUNK_HEADER_SIZE
        count = math.ceil(len(data) / piece_size)
        if count > GELF_MAX_CHUNKS:
            return []

        message_id = os.urandom(8)
        return [
            GELF_CHUNK_MAGIC + message_id + bytes((seq, count))
            + data[seq * piece_size:(seq + 1) * piece_size]
            for seq in range(count)
        ]

    def _create_socket(self) -> socket.socket:
        """Create UDP socket."""
        return socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def _write(self, record: LogRecord) -> None:
        """Send log record to Graylog."""
        if self._closed:
            return

        data = self.encode(self.build_message(record))
        datagrams = self.chunk(data)

        with self._lock:
            if not datagrams:
                self._stats.record_drop()
                return

            try:
                if self._socket is None:
                    self._socket = self._create_socket()
                for datagram in datagrams:
                    self._socket.sendto(datagram, self._target)
            except OSError as e:
                self._stats.record_failure(str(e))
                return

            self._stats.record_success(len(data), len(datagrams))

    def get_stats(self) -> GraylogStats:
        """
        Get transport statistics.

        Returns:
            Copy of current statistics
        """
        with self._lock:
            return GraylogStats(**vars(self._stats))

    def close(self) -> None:
        """Close socket and stop sending."""
        with self._lock:
            self._closed = True
            if self._socket:
                self._socket.close()
                self._socket = None

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"GraylogSink(target={self.graylog_hostname}:{self.graylog_port}, "
            f"level={self._level})"
        )

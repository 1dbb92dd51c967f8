"""Record types produced by the log parsers.

All fields are kept as the exact text captured from the log line, so a
record serializes back to the same strings that appeared in the file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class LogRecord:
    """Base for sealed, immutable log records."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class LaravelLogEntry(LogRecord):
    """A Laravel application log entry, possibly spanning several lines."""

    timestamp: str
    severity: str
    message: str


@dataclass(frozen=True)
class ApacheLogEntry(LogRecord):
    """An Apache error log entry."""

    timestamp: str
    severity: str
    process_id: str
    message: str


@dataclass(frozen=True)
class AccessLogEntry(LogRecord):
    """A single Common/Combined access log request."""

    client_ip: str
    timestamp: str
    http_method: str
    request_url: str
    protocol: str
    status_code: str
    response_size: str
    referrer: str
    user_agent: str

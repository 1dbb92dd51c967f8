"""Field filters applied to sealed records."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from log_analyzer.records import LogRecord

FILTER_NAMES = ("date", "level", "status", "method")


def _equals_ignore_case(value: str | None, expected: str) -> bool:
    return value is not None and value.lower() == expected.lower()


@dataclass(frozen=True)
class RecordFilter:
    """Conjunction of optional field predicates.

    - date: substring of the record timestamp
    - level: severity, case-insensitive equality
    - status: HTTP status code, exact match
    - method: HTTP method, case-insensitive equality

    A predicate whose field the record does not have is ignored.
    """

    date: str | None = None
    level: str | None = None
    status: str | None = None
    method: str | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in FILTER_NAMES)

    def restricted_to(self, names: Iterable[str]) -> RecordFilter:
        """Return a copy keeping only the named predicates."""
        keep = set(names)
        return replace(self, **{n: None for n in FILTER_NAMES if n not in keep})

    def matches(self, record: LogRecord) -> bool:
        if self.date is not None:
            timestamp = getattr(record, "timestamp", None)
            if timestamp is not None and self.date not in timestamp:
                return False
        if self.level is not None and hasattr(record, "severity"):
            if not _equals_ignore_case(record.severity, self.level):
                return False
        if self.status is not None and hasattr(record, "status_code"):
            if record.status_code != self.status:
                return False
        if self.method is not None and hasattr(record, "http_method"):
            if not _equals_ignore_case(record.http_method, self.method):
                return False
        return True

    def apply(self, records: Iterable[LogRecord]) -> list[LogRecord]:
        """Return matching records, preserving order."""
        if self.is_empty:
            return list(records)
        return [r for r in records if self.matches(r)]

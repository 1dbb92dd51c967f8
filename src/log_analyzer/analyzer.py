"""Per-format pipelines: parse a log file, then filter the sealed records."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from log_analyzer.filters import RecordFilter
from log_analyzer.parsers import ParseResult, ParserRegistry

logger = logging.getLogger(__name__)


def analyze_log(
    format_name: str,
    path: str | Path,
    record_filter: RecordFilter | None = None,
) -> ParseResult:
    """Parse ``path`` as ``format_name`` and apply the relevant filters.

    Filters that do not apply to the format are ignored.
    Raises KeyError for an unknown format and InputAccessError if the
    file cannot be read.
    """
    parser = ParserRegistry.get(format_name)
    result = parser.parse_file(path)

    parsed = len(result.records)
    if record_filter is not None:
        active = record_filter.restricted_to(parser.log_format.filters)
        result = replace(result, records=active.apply(result.records))

    logger.info(
        "%s: %d lines read, %d records parsed, %d kept, %d lines skipped",
        path, result.lines_read, parsed, len(result.records), result.skipped,
    )
    return result


def analyze_laravel_log(
    path: str | Path, date: str | None = None, level: str | None = None,
) -> ParseResult:
    """Parse a Laravel log, keeping entries that match ``date`` and ``level``."""
    return analyze_log("laravel", path, RecordFilter(date=date, level=level))


def analyze_apache_log(
    path: str | Path, date: str | None = None, level: str | None = None,
) -> ParseResult:
    """Parse an Apache error log, keeping entries that match ``date`` and ``level``."""
    return analyze_log("apache", path, RecordFilter(date=date, level=level))


def analyze_access_log(
    path: str | Path, status: str | None = None, method: str | None = None,
) -> ParseResult:
    """Parse an access log, keeping requests that match ``status`` and ``method``."""
    return analyze_log("access", path, RecordFilter(status=status, method=method))

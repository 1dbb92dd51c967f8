"""JSON serialization of parsed records and the persisted output file."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable

from log_analyzer.analyzer import analyze_log
from log_analyzer.errors import OutputWriteError, SerializationError
from log_analyzer.filters import RecordFilter
from log_analyzer.records import LogRecord

logger = logging.getLogger(__name__)


def default_output_dir() -> Path:
    """Current directory on Windows, ``~/logs`` elsewhere."""
    if sys.platform == "win32":
        return Path.cwd()
    return Path.home() / "logs"


def render_json(records: Iterable[LogRecord | dict[str, Any]], indent: int | None = 2) -> str:
    """Serialize records to a JSON array.

    Raises SerializationError if a value cannot be encoded.
    """
    items = [r.to_dict() if isinstance(r, LogRecord) else r for r in records]
    try:
        return json.dumps(items, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to convert to JSON: {e}") from e


def write_output(
    records: Iterable[LogRecord | dict[str, Any]],
    path: str | Path,
    indent: int | None = 2,
) -> Path:
    """Write records as JSON to ``path``, creating parent directories.

    Nothing is written if serialization fails.
    """
    text = render_json(records, indent=indent)
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Failed to write to {path}: {e}") from e
    logger.debug("Wrote %d bytes to %s", len(text), path)
    return path


def analyze_log_json(
    format_name: str,
    path: str | Path,
    record_filter: RecordFilter | None = None,
) -> str:
    """Parse a log file and return its records as a compact JSON string."""
    result = analyze_log(format_name, path, record_filter)
    return render_json(result.records, indent=None)

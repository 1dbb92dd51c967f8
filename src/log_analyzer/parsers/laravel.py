"""Log format for Laravel application logs (storage/logs/laravel.log).

Format: [YYYY-MM-DD HH:MM:SS] env.LEVEL: message
Stack traces and other lines that follow an entry belong to that entry.
"""

from __future__ import annotations

import re

from log_analyzer.parsers.base import LogFormat
from log_analyzer.parsers.registry import ParserRegistry
from log_analyzer.records import LaravelLogEntry

_LARAVEL_PATTERN = re.compile(
    r"^\[(?P<date>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] "
    r"(?P<env>\w+)\.(?P<level>\w+): "
    r"(?P<message>.+)$"
)

LARAVEL_FORMAT = ParserRegistry.register(LogFormat(
    name="laravel",
    pattern=_LARAVEL_PATTERN,
    fields=(
        ("timestamp", "date"),
        ("severity", "level"),
        ("message", "message"),
    ),
    record_type=LaravelLogEntry,
    multiline=True,
    filters=frozenset({"date", "level"}),
    output_name="laravel_log_output.json",
))

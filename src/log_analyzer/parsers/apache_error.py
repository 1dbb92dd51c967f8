"""Log format for Apache 2.4 error logs.

Format: [DOW Mon DD HH:MM:SS.USEC YYYY] [module:level] [pid PID(:tid TID)] [client IP:PORT] message

The client clause is optional. Lines that do not start a new entry
(e.g. wrapped PHP stack traces) are folded into the previous entry.
"""

from __future__ import annotations

import re

from log_analyzer.parsers.base import LogFormat
from log_analyzer.parsers.registry import ParserRegistry
from log_analyzer.records import ApacheLogEntry

_ERROR_PATTERN = re.compile(
    r"^\[(?P<date>[A-Za-z]{3} [A-Za-z]{3} \d{2} \d{2}:\d{2}:\d{2}\.\d+ \d{4})\] "
    r"\[(?P<module>[^:]+):(?P<level>[^\]]+)\] "
    r"\[pid (?P<pid>\d+)(?::tid \d+)?\]"
    r"(?: \[client (?P<client>[^\]]+)\])? "
    r"(?P<message>.+)$"
)

APACHE_FORMAT = ParserRegistry.register(LogFormat(
    name="apache",
    pattern=_ERROR_PATTERN,
    fields=(
        ("timestamp", "date"),
        ("severity", "level"),
        ("process_id", "pid"),
        ("message", "message"),
    ),
    record_type=ApacheLogEntry,
    multiline=True,
    filters=frozenset({"date", "level"}),
    output_name="apache_log_output.json",
))

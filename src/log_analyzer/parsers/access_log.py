"""Log format for Apache/Nginx combined access logs.

Format: IP - - [datetime] "method url protocol" status size "referrer" "user_agent"

Every entry is a single line; lines that do not match are dropped.
"""

from __future__ import annotations

import re

from log_analyzer.parsers.base import LogFormat
from log_analyzer.parsers.registry import ParserRegistry
from log_analyzer.records import AccessLogEntry

# Combined log format regex
_ACCESS_PATTERN = re.compile(
    r'^(?P<ip>\S+) - - '
    r'\[(?P<datetime>[^\]]+)\] '
    r'"(?P<method>\S+) (?P<url>\S+) (?P<protocol>[^"]+)" '
    r'(?P<status>\d+) '
    r'(?P<size>\d+) '
    r'"(?P<referrer>[^"]*)" '
    r'"(?P<user_agent>[^"]*)"$'
)

ACCESS_FORMAT = ParserRegistry.register(LogFormat(
    name="access",
    pattern=_ACCESS_PATTERN,
    fields=(
        ("client_ip", "ip"),
        ("timestamp", "datetime"),
        ("http_method", "method"),
        ("request_url", "url"),
        ("protocol", "protocol"),
        ("status_code", "status"),
        ("response_size", "size"),
        ("referrer", "referrer"),
        ("user_agent", "user_agent"),
    ),
    record_type=AccessLogEntry,
    filters=frozenset({"status", "method"}),
    output_name="access_log_output.json",
))

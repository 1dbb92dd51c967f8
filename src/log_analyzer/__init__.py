"""log-analyzer: parse Laravel, Apache error and access logs into JSON records."""

from log_analyzer.parsers import LogFormat, ParseResult, Parser, ParserRegistry, RecordAssembler
from log_analyzer.records import AccessLogEntry, ApacheLogEntry, LaravelLogEntry, LogRecord
from log_analyzer.filters import RecordFilter
from log_analyzer.analyzer import (
    analyze_access_log,
    analyze_apache_log,
    analyze_laravel_log,
    analyze_log,
)
from log_analyzer.config import AnalyzerConfig, load_config
from log_analyzer.errors import (
    InputAccessError,
    LogAnalyzerError,
    OutputWriteError,
    SerializationError,
    UsageError,
)
from log_analyzer.output import analyze_log_json, render_json, write_output

__all__ = [
    "AccessLogEntry",
    "AnalyzerConfig",
    "ApacheLogEntry",
    "InputAccessError",
    "LaravelLogEntry",
    "LogAnalyzerError",
    "LogFormat",
    "LogRecord",
    "OutputWriteError",
    "ParseResult",
    "Parser",
    "ParserRegistry",
    "RecordAssembler",
    "RecordFilter",
    "SerializationError",
    "UsageError",
    "analyze_access_log",
    "analyze_apache_log",
    "analyze_laravel_log",
    "analyze_log",
    "analyze_log_json",
    "load_config",
    "render_json",
    "write_output",
]

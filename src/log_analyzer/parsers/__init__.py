from log_analyzer.parsers.base import LogFormat, ParseResult, Parser, RecordAssembler
from log_analyzer.parsers.registry import ParserRegistry

# Import format modules to register their formats
import log_analyzer.parsers.laravel  # noqa: F401
import log_analyzer.parsers.apache_error  # noqa: F401
import log_analyzer.parsers.access_log  # noqa: F401

__all__ = ["LogFormat", "ParseResult", "Parser", "ParserRegistry", "RecordAssembler"]

"""Name -> LogFormat table backing the per-format parsers."""

from __future__ import annotations

from log_analyzer.parsers.base import LogFormat, Parser


class ParserRegistry:
    """Holds every known ``LogFormat``, keyed by its name."""

    _formats: dict[str, LogFormat] = {}

    @classmethod
    def register(cls, log_format: LogFormat) -> LogFormat:
        """Add a format to the table and return it unchanged."""
        if log_format.name in cls._formats:
            raise ValueError(f"Log format already registered: {log_format.name!r}")
        cls._formats[log_format.name] = log_format
        return log_format

    @classmethod
    def get_format(cls, name: str) -> LogFormat:
        try:
            return cls._formats[name]
        except KeyError:
            raise KeyError(f"Unknown log format: {name!r}. Available: {cls.available()}") from None

    @classmethod
    def get(cls, name: str) -> Parser:
        """Return a parser for the named format."""
        return Parser(cls.get_format(name))

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._formats)

"""Exception types raised by log-analyzer."""

from __future__ import annotations


class LogAnalyzerError(Exception):
    """Base class for all log-analyzer errors."""


class UsageError(LogAnalyzerError):
    """No log format selected, or more than one selected."""


class InputAccessError(LogAnalyzerError):
    """The log file could not be opened, read or decoded."""


class SerializationError(LogAnalyzerError):
    """Parsed records could not be converted to JSON."""


class OutputWriteError(LogAnalyzerError):
    """The JSON output file could not be written."""

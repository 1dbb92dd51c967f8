"""Shared types for log parsers: format table, record assembly, parse results."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from log_analyzer.errors import InputAccessError
from log_analyzer.records import LogRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFormat:
    """Declarative description of one log format.

    ``fields`` maps record attribute names to capture groups of ``pattern``,
    in record order. Multiline formats fold non-matching lines into the
    ``message`` field of the open record.
    """

    name: str
    pattern: re.Pattern[str]
    fields: tuple[tuple[str, str], ...]
    record_type: type[LogRecord]
    multiline: bool = False
    filters: frozenset[str] = frozenset()
    output_name: str = ""

    def classify(self, line: str) -> dict[str, str] | None:
        """Return captured record fields if ``line`` is a header line, else None."""
        m = self.pattern.match(line)
        if not m:
            return None
        return {attr: m.group(group) or "" for attr, group in self.fields}


@dataclass(frozen=True)
class ParseResult:
    """Records parsed from one input, in file order."""

    records: list[LogRecord] = field(default_factory=list)
    skipped: int = 0
    lines_read: int = 0

    def __len__(self) -> int:
        return len(self.records)


class RecordAssembler:
    """Folds classified lines into sealed records for a single parse call.

    A header line seals the open record (if any) and opens a new one.
    For multiline formats a non-header line is appended to the open
    record's message; with no open record, or for single-line formats,
    it is dropped and counted in ``skipped`` (blank lines are not counted).
    """

    def __init__(self, log_format: LogFormat):
        self.log_format = log_format
        self.skipped = 0
        self.lines_read = 0
        self._sealed: list[LogRecord] = []
        self._current: dict[str, str] | None = None
        self._continuation: list[str] = []

    def feed(self, line: str) -> None:
        self.lines_read += 1
        captured = self.log_format.classify(line)

        if captured is not None:
            logger.debug("%s header: %s", self.log_format.name, line)
            if not self.log_format.multiline:
                self._sealed.append(self.log_format.record_type(**captured))
                return
            self._seal()
            self._current = captured
            return

        if self.log_format.multiline and self._current is not None:
            self._continuation.append(line)
            return

        if line.strip():
            self.skipped += 1
        logger.debug("%s no match, dropped: %s", self.log_format.name, line)

    def finish(self) -> list[LogRecord]:
        """Seal the open record and return all records in file order."""
        self._seal()
        return list(self._sealed)

    def _seal(self) -> None:
        if self._current is None:
            return
        values = dict(self._current)
        if self._continuation:
            values["message"] = "\n".join([values["message"], *self._continuation])
        self._sealed.append(self.log_format.record_type(**values))
        self._current = None
        self._continuation = []


class Parser:
    """Parses lines of one registered ``LogFormat`` into records."""

    def __init__(self, log_format: LogFormat):
        self.log_format = log_format

    @property
    def name(self) -> str:
        return self.log_format.name

    def parse_line(self, line: str) -> LogRecord | None:
        """Parse a single header line. Returns None if the line is not a header."""
        captured = self.log_format.classify(line.rstrip("\r\n"))
        if captured is None:
            return None
        return self.log_format.record_type(**captured)

    def parse_lines(self, lines: Iterable[str]) -> ParseResult:
        """Assemble records from an iterable of lines."""
        assembler = RecordAssembler(self.log_format)
        for line in lines:
            assembler.feed(line.rstrip("\r\n"))
        records = assembler.finish()
        return ParseResult(
            records=records,
            skipped=assembler.skipped,
            lines_read=assembler.lines_read,
        )

    def parse_file(self, path: str | Path) -> ParseResult:
        """Parse a UTF-8 log file. Only LF ends a line; a lone CR is kept as text.

        Raises InputAccessError if the file cannot be opened, read or decoded.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8", newline="\n") as f:
                return self.parse_lines(f)
        except OSError as e:
            raise InputAccessError(f"Unable to open {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise InputAccessError(f"{path} is not valid UTF-8: {e}") from e

"""Analyzer configuration dataclass and YAML loading/validation.

Example ``log-analyzer.yaml``::

    analyzer:
      output_dir: out            # relative to this file
      indent: 2
      save: true
      strict: false
      output_names:
        access: access.json
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from log_analyzer.parsers import ParserRegistry


@dataclass(frozen=True)
class AnalyzerConfig:
    """Output and run settings. ``output_dir=None`` means the platform default."""

    output_dir: Path | None = None
    output_names: dict[str, str] = field(default_factory=dict)
    indent: int = 2
    save: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        unknown = sorted(set(self.output_names) - set(ParserRegistry.available()))
        if unknown:
            raise ValueError(
                f"Unknown log format(s) in output_names: {unknown}. "
                f"Available: {ParserRegistry.available()}"
            )

    def output_name(self, format_name: str) -> str:
        """File name of the JSON artifact written for ``format_name``."""
        if format_name in self.output_names:
            return self.output_names[format_name]
        return ParserRegistry.get_format(format_name).output_name


def _as_bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"analyzer.{key} must be true or false, got {value!r}")
    return value


def _as_int(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"analyzer.{key} must be an integer, got {value!r}")
    return value


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Parse and validate an analyzer YAML config. No path gives the defaults."""
    if path is None:
        return AnalyzerConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict) or "analyzer" not in raw:
        raise ValueError("Config must have an 'analyzer' top-level key")
    section = raw["analyzer"] or {}
    if not isinstance(section, dict):
        raise ValueError("analyzer section must be a mapping")

    output_dir = section.get("output_dir")
    if output_dir is not None:
        if not isinstance(output_dir, str):
            raise ValueError(f"analyzer.output_dir must be a path, got {output_dir!r}")
        output_dir = Path(output_dir).expanduser()
        if not output_dir.is_absolute():
            output_dir = path.parent / output_dir

    output_names = section.get("output_names") or {}
    if not isinstance(output_names, dict):
        raise ValueError("analyzer.output_names must be a mapping of format -> file name")

    return AnalyzerConfig(
        output_dir=output_dir,
        output_names={str(k): str(v) for k, v in output_names.items()},
        indent=_as_int(section, "indent", 2),
        save=_as_bool(section, "save", True),
        strict=_as_bool(section, "strict", False),
    )

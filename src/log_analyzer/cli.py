"""CLI entry point: log-analyzer <log_path> (--laravel | --apache | --access) [filters]."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from log_analyzer.analyzer import analyze_log
from log_analyzer.config import load_config
from log_analyzer.errors import (
    InputAccessError,
    OutputWriteError,
    SerializationError,
    UsageError,
)
from log_analyzer.filters import RecordFilter
from log_analyzer.output import default_output_dir, render_json, write_output

logger = logging.getLogger(__name__)

FORMAT_FLAGS = ("laravel", "apache", "access")
NO_FORMAT_MESSAGE = "Please specify the log type with --laravel, --apache, or --access."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="log-analyzer",
        description="Analyzes Apache, Laravel, and Access log files",
    )
    parser.add_argument("log_path", type=Path, help="Path to the log file")

    formats = parser.add_mutually_exclusive_group()
    formats.add_argument("--laravel", action="store_true", help="Indicates the log is a Laravel log")
    formats.add_argument("--apache", action="store_true", help="Indicates the log is an Apache error log")
    formats.add_argument("--access", action="store_true", help="Indicates the log is an Access log")

    filters = parser.add_argument_group("filters")
    filters.add_argument("--date", help="Filter logs by date (e.g., 2024-08-22)")
    filters.add_argument("--type", dest="level", help="Filter logs by error type (e.g., ERROR)")
    filters.add_argument("--status", help="Filter Access logs by HTTP status code (e.g., 200, 404)")
    filters.add_argument("--method", help="Filter Access logs by HTTP method (e.g., GET, POST)")

    parser.add_argument("--config", type=Path, help="Path to analyzer YAML config")
    parser.add_argument("--output-dir", type=Path, help="Directory for the JSON output file")
    parser.add_argument("--no-save", action="store_true", help="Print results without writing a file")
    parser.add_argument(
        "--strict", action="store_true",
        help="Exit with status 1 if any line did not match the log format",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def select_format(args: argparse.Namespace) -> str:
    """Return the single selected format name. Raises UsageError otherwise."""
    selected = [name for name in FORMAT_FLAGS if getattr(args, name, False)]
    if not selected:
        raise UsageError(NO_FORMAT_MESSAGE)
    if len(selected) > 1:
        raise UsageError(f"Only one log type may be given, got: {', '.join(selected)}")
    return selected[0]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        format_name = select_format(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 0

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Invalid config %s: %s", args.config, e)
        return 1

    record_filter = RecordFilter(
        date=args.date, level=args.level, status=args.status, method=args.method,
    )
    try:
        result = analyze_log(format_name, args.log_path, record_filter)
    except InputAccessError as e:
        logger.error("%s", e)
        return 1

    try:
        text = render_json(result.records, indent=config.indent)
    except SerializationError as e:
        print(e, file=sys.stderr)
        return 1
    print(text)

    if config.save and not args.no_save:
        output_dir = args.output_dir or config.output_dir or default_output_dir()
        try:
            path = write_output(
                result.records, output_dir / config.output_name(format_name), indent=config.indent,
            )
        except (SerializationError, OutputWriteError) as e:
            print(e, file=sys.stderr)
            return 1
        print(f"Output saved to {path}")

    if (args.strict or config.strict) and result.skipped:
        logger.warning(
            "%d line(s) in %s did not match the %s format",
            result.skipped, args.log_path, format_name,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

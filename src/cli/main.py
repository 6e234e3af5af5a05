# SPDX-License-Identifier: MIT
"""Command-line interface for translating legacy provisioning configs."""

from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable, cast

import logfire

from core import translate
from io_utils import (
    load_legacy_config,
    parse_legacy_config,
    render_config,
    write_config,
)
from migrate_jsonl import migrate_jsonl
from observability import LogLevel, init_logfire
from runtime.settings import Settings, load_settings

LOG_LEVELS = ["fatal", "error", "warn", "notice", "info", "debug", "trace"]


def _non_negative_int(value: str) -> int:
    """Return ``value`` as an int, rejecting negative numbers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


# Module logger for CLI diagnostics mirroring
logger = logging.getLogger(__name__)


def _print_version() -> None:
    """Print the installed package version."""
    try:
        pkg_version = version("ignition-translate")
    except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
        pkg_version = "unknown"
    line = f"ignition-translate {pkg_version}"
    print(line)
    logger.info(line)


def _print_diagnostics() -> None:
    """Output basic environment information for health checks."""
    _print_version()
    print(f"Python {platform.python_version()}")
    print(f"Platform {platform.platform()}")
    configured = sorted(var for var in os.environ if var.startswith("IGN_"))
    if configured:
        print("Configured env vars: " + ", ".join(configured))
    else:
        print("No IGN_ env vars set")


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire based on verbosity flags and settings."""
    base = settings.log_level.lower()
    base = "warn" if base == "warning" else base
    start = LOG_LEVELS.index(base) if base in LOG_LEVELS else LOG_LEVELS.index("info")
    index = start + args.verbose - args.quiet
    index = max(0, min(len(LOG_LEVELS) - 1, index))
    init_logfire(settings.logfire_token, cast(LogLevel, LOG_LEVELS[index]))


def _cmd_translate(args: argparse.Namespace, settings: Settings) -> int:
    """Translate one legacy config from a file or stdin."""
    if args.input == "-":
        legacy = parse_legacy_config(sys.stdin.read())
    else:
        legacy = load_legacy_config(Path(args.input))
    config = translate(legacy)
    indent = settings.json_indent if args.indent is None else args.indent
    if args.output:
        write_config(Path(args.output), config, indent)
        logfire.info("Wrote translated config", output=args.output)
    else:
        sys.stdout.write(render_config(config, indent) + "\n")
    return 0


def _cmd_migrate_jsonl(args: argparse.Namespace, settings: Settings) -> int:
    """Migrate every config in a JSONL file to the current schema."""
    count = migrate_jsonl(Path(args.input), Path(args.output))
    print(f"Migrated {count} record(s) to {args.output}")
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add CLI options shared across subcommands."""
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease logging verbosity (repeatable)",
    )
    return parser


def _add_translate_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``translate`` subcommand parser."""
    parser = subparsers.add_parser(
        "translate",
        parents=[common],
        help="Translate a legacy config to the current schema",
        description=(
            "Read a legacy config as JSON and write the equivalent 2.0.0 config."
        ),
    )
    parser.add_argument("input", help="Legacy config file, or '-' for stdin")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="File to write the result. Defaults to stdout.",
    )
    parser.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="JSON indentation. Overrides the json_indent setting.",
    )
    parser.set_defaults(func=_cmd_translate)
    return parser


def _add_migrate_jsonl_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``migrate-jsonl`` subcommand parser."""
    parser = subparsers.add_parser(
        "migrate-jsonl",
        parents=[common],
        help="Migrate a JSONL file of configs to the current schema",
    )
    parser.add_argument("--input", required=True, help="Source JSONL file")
    parser.add_argument("--output", required=True, help="Destination JSONL file")
    parser.set_defaults(func=_cmd_migrate_jsonl)
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        prog="ignition-translate",
        description="Translate legacy provisioning configs to the 2.0.0 schema.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the ignition-translate version and exit.",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Print environment diagnostics and exit.",
    )
    common = _add_common_args(argparse.ArgumentParser(add_help=False))
    subparsers = parser.add_subparsers(dest="command")
    _add_translate_subparser(subparsers, common)
    _add_migrate_jsonl_subparser(subparsers, common)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        _print_version()
        return
    if args.diagnostics:
        _print_diagnostics()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(1)
    try:
        settings = load_settings(args.config)
        _configure_logging(args, settings)
        func = cast(Callable[[argparse.Namespace, Settings], int], args.func)
        code = func(args, settings)
    except (OSError, RuntimeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    finally:
        logfire.force_flush()
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    # Allow module to be executed as a standalone script
    main()

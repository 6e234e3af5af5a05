"""Utilities for migrating JSONL files of configs to the latest schema."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import logfire

from io_utils import atomic_write
from models import TARGET_VERSION
from schema_migration import detect_version, migrate_record


def _migrate_lines(input_path: Path) -> Iterator[str]:
    with Path(input_path).open("r", encoding="utf-8") as src:
        for number, line in enumerate(src, start=1):
            if not line.strip():
                continue
            document = json.loads(line)
            if not isinstance(document, dict):
                raise ValueError(f"Line {number}: expected a JSON object")
            version = detect_version(document)
            logfire.debug("Migrating record", line=number, version=str(version))
            migrated = migrate_record(version, TARGET_VERSION, document)
            yield json.dumps(migrated, separators=(",", ":"))


def migrate_jsonl(input_path: Path, output_path: Path) -> int:
    """Migrate configs in ``input_path`` writing results to ``output_path``.

    Each non-blank line holds one document; its version is detected and it
    is upgraded to the current schema. Documents already current are copied.
    The output is only replaced once every line migrated.

    Args:
        input_path: Location of the JSONL file.
        output_path: Destination for migrated records.

    Returns:
        Number of records written to ``output_path``.
    """

    with logfire.span("migrate_jsonl", attributes={"input": str(input_path)}):
        lines = list(_migrate_lines(Path(input_path)))
        atomic_write(Path(output_path), lines)
        logfire.info("Migrated records", count=len(lines), output=str(output_path))
        return len(lines)


__all__ = ["migrate_jsonl"]

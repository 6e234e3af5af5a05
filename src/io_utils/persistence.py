# SPDX-License-Identifier: MIT
"""Utilities for serialising translated configs and writing them safely."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

import logfire

from models import SchemaModel


def render_config(config: SchemaModel, indent: int | None = 2) -> str:
    """Return ``config`` as JSON using the schema's wire keys.

    Absent optional fields are omitted, empty lists are kept and keys follow
    model field order, so equal configs always render identically.
    """

    return config.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def atomic_write(path: Path, lines: Iterable[str]) -> None:
    """Write ``lines`` to ``path`` atomically.

    Args:
        path: Destination file to replace.
        lines: Iterable of lines to write without trailing newlines.

    The function writes to ``path`` with a ``.tmp`` suffix, flushes and
    syncs the temporary file to disk, then performs :func:`os.replace` to
    ensure the final file is updated atomically. The temporary file is removed
    when writing or replacing fails.
    """
    with logfire.span("fs.atomic_write", attributes={"path": str(path)}):
        tmp_path = Path(f"{path}.tmp")
        tmp_path.parent.mkdir(parents=True, exist_ok=True)
        count = 0
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                for line in lines:
                    handle.write(f"{line}\n")
                    count += 1
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logfire.debug("Atomic write complete", path=str(path), lines=count)


def write_config(path: Path, config: SchemaModel, indent: int | None = 2) -> None:
    """Atomically write ``config`` as JSON to ``path``."""

    atomic_write(Path(path), [render_config(config, indent)])


__all__ = ["atomic_write", "render_config", "write_config"]

# SPDX-License-Identifier: MIT
"""Semantic version values used to stamp configuration documents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SchemaVersion:
    """``major.minor.patch`` triple identifying a schema revision."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, value: str | int) -> "SchemaVersion":
        """Return the version described by ``value``.

        Missing minor and patch components default to zero so the legacy
        integer stamp ``1`` parses as ``1.0.0``.

        Raises:
            ValueError: If ``value`` is not a dotted list of at most three
                non-negative integers.
        """

        parts = str(value).strip().split(".")
        if not parts or len(parts) > 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid schema version: {value!r}")
        return cls(*(int(p) for p in parts))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


LEGACY_VERSION = SchemaVersion(1)
TARGET_VERSION = SchemaVersion(2)

__all__ = ["LEGACY_VERSION", "SchemaVersion", "TARGET_VERSION"]

# SPDX-License-Identifier: MIT
"""Schema version migration utilities for raw config documents."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from core import translate
from models import LEGACY_VERSION, TARGET_VERSION, SchemaVersion, v1


def detect_version(document: Mapping[str, Any]) -> SchemaVersion:
    """Return the schema version ``document`` is written against.

    Current documents carry ``ignition.version``. Legacy documents either
    carry the integer ``ignitionVersion`` stamp ``1`` or no stamp at all.

    Raises:
        ValueError: If the version stamp is malformed or unknown.
    """

    ignition = document.get("ignition")
    if isinstance(ignition, Mapping) and "version" in ignition:
        return SchemaVersion.parse(ignition["version"])
    legacy = document.get("ignitionVersion")
    if legacy is None or (legacy == 1 and not isinstance(legacy, bool)):
        return LEGACY_VERSION
    raise ValueError(f"Unsupported ignitionVersion: {legacy!r}")


def migrate_record(
    from_version: str | SchemaVersion,
    to_version: str | SchemaVersion,
    data: Mapping[str, Any],
) -> Dict[str, Any]:
    """Migrate a config document between schema versions.

    Args:
        from_version: Version of the input ``data``.
        to_version: Desired schema version. Only the single step from the
            legacy schema to ``2.0.0`` is supported.
        data: Mapping conforming to ``from_version`` of the schema.

    Returns:
        The migrated document. ``data`` is never mutated.

    Raises:
        ValueError: If the version pair is unsupported or ``data`` is not a
            valid document for ``from_version``.

    Examples:
        >>> migrate_record("1", "2.0.0", {"ignitionVersion": 1})["ignition"]
        {'version': '2.0.0', 'config': {'append': []}, 'timeouts': {}}
    """

    source = SchemaVersion.parse(str(from_version))
    target = SchemaVersion.parse(str(to_version))

    if source == target:
        # Already on the requested version; return a copy to preserve immutability.
        return deepcopy(dict(data))

    if source == LEGACY_VERSION and target == TARGET_VERSION:
        try:
            legacy = v1.Config.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid {source} config: {exc}") from exc
        return translate(legacy).to_document()

    raise ValueError(f"Unsupported schema migration: {source} → {target}")


__all__ = ["detect_version", "migrate_record"]

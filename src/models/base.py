# SPDX-License-Identifier: MIT
"""Shared base classes for the configuration schema models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


class SchemaModel(StrictModel):
    """Immutable configuration node serialised with camelCase wire keys.

    Attributes use snake_case in Python while the JSON documents use the
    camelCase keys of the provisioning schema. Instances are frozen so a
    translated document can be shared without defensive copies.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self) -> dict[str, Any]:
        """Return the JSON-compatible wire form of this node.

        Absent optional values are omitted while empty lists are kept, so a
        present-but-empty section is distinguishable from a missing field.
        """

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["SchemaModel", "StrictModel"]

# SPDX-License-Identifier: MIT
"""Pydantic models for the 2.0.0 provisioning schema.

Compared to the legacy schema, filesystems are named entities and files are
listed separately, pointing at their filesystem by name. File contents are
URI content references. Ownership, mode and password hashes are optional so
that an explicit zero is distinguishable from "not set".
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .base import SchemaModel


class Verification(SchemaModel):
    """Expected digest of fetched data, as ``<type>-<value>``."""

    hash: str | None = None


class ConfigReference(SchemaModel):
    """Remote config merged into or replacing the current one."""

    source: Annotated[str, Field(min_length=1, description="Config URI.")]
    verification: Verification = Field(default_factory=Verification)


class IgnitionConfig(SchemaModel):
    append: list[ConfigReference] = Field(default_factory=list)
    replace: ConfigReference | None = None


class Timeouts(SchemaModel):
    """Network fetch timeouts in seconds."""

    http_response_headers: int | None = None
    http_total: int | None = None


class Ignition(SchemaModel):
    """Metadata describing the document itself."""

    version: Annotated[
        str, Field(min_length=1, description="Schema version of the document.")
    ]
    config: IgnitionConfig = Field(default_factory=IgnitionConfig)
    timeouts: Timeouts = Field(default_factory=Timeouts)


class Partition(SchemaModel):
    label: str = ""
    number: int = 0
    size: int = 0
    start: int = 0
    type_guid: str = ""


class Disk(SchemaModel):
    device: Annotated[str, Field(min_length=1)]
    wipe_table: bool = False
    partitions: list[Partition] = Field(default_factory=list)


class Raid(SchemaModel):
    name: Annotated[str, Field(min_length=1)]
    level: Annotated[str, Field(min_length=1)]
    devices: list[str] = Field(default_factory=list)
    spares: int = 0


class Create(SchemaModel):
    """Directive to run ``mkfs`` on the mount device."""

    force: bool = False
    options: list[str] = Field(default_factory=list)


class Mount(SchemaModel):
    """Device backing a filesystem and how to format it."""

    device: Annotated[str, Field(min_length=1)]
    format: Annotated[str, Field(min_length=1)]
    create: Create | None = None


class Filesystem(SchemaModel):
    """Named filesystem referenced by files through ``File.filesystem``.

    Exactly one of ``mount`` and ``path`` is expected; ``path`` names a
    filesystem that is already mounted.
    """

    name: Annotated[str, Field(min_length=1, description="Filesystem name.")]
    mount: Mount | None = None
    path: str | None = None


class FileContents(SchemaModel):
    """Content reference for a file."""

    compression: str = ""
    source: str = Field("", description="URI of the file contents.")
    verification: Verification = Field(default_factory=Verification)


class NodeUser(SchemaModel):
    id: int | None = None


class NodeGroup(SchemaModel):
    id: int | None = None


class File(SchemaModel):
    """File written to a named filesystem."""

    filesystem: Annotated[
        str, Field(min_length=1, description="Name of the owning filesystem.")
    ]
    path: Annotated[str, Field(min_length=1, description="Absolute file path.")]
    contents: FileContents = Field(default_factory=FileContents)
    mode: int | None = None
    user: NodeUser | None = None
    group: NodeGroup | None = None


class Storage(SchemaModel):
    disks: list[Disk] = Field(default_factory=list)
    raid: list[Raid] = Field(default_factory=list)
    filesystems: list[Filesystem] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)


class Dropin(SchemaModel):
    name: Annotated[str, Field(min_length=1)]
    contents: str = ""


class Unit(SchemaModel):
    """Systemd unit file."""

    name: Annotated[str, Field(min_length=1)]
    enable: bool = False
    mask: bool = False
    contents: str = ""
    dropins: list[Dropin] = Field(default_factory=list)


class Systemd(SchemaModel):
    units: list[Unit] = Field(default_factory=list)


class NetworkdUnit(SchemaModel):
    name: Annotated[str, Field(min_length=1)]
    contents: str = ""


class Networkd(SchemaModel):
    units: list[NetworkdUnit] = Field(default_factory=list)


class UserCreate(SchemaModel):
    """Directive to create a user account with ``useradd``."""

    uid: int | None = None
    gecos: str = ""
    home_dir: str = ""
    no_create_home: bool = False
    primary_group: str = ""
    groups: list[str] = Field(default_factory=list)
    no_user_group: bool = False
    system: bool = False
    no_log_init: bool = False
    shell: str = ""


class User(SchemaModel):
    name: Annotated[str, Field(min_length=1)]
    password_hash: str | None = None
    ssh_authorized_keys: list[str] = Field(default_factory=list)
    create: UserCreate | None = None


class Group(SchemaModel):
    name: Annotated[str, Field(min_length=1)]
    gid: int | None = None
    password_hash: str = ""
    system: bool = False


class Passwd(SchemaModel):
    users: list[User] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)


class Config(SchemaModel):
    """Root of a 2.0.0 provisioning config."""

    ignition: Ignition
    storage: Storage = Field(default_factory=Storage)
    systemd: Systemd = Field(default_factory=Systemd)
    networkd: Networkd = Field(default_factory=Networkd)
    passwd: Passwd = Field(default_factory=Passwd)


__all__ = [
    "Config",
    "ConfigReference",
    "Create",
    "Disk",
    "Dropin",
    "File",
    "FileContents",
    "Filesystem",
    "Group",
    "Ignition",
    "IgnitionConfig",
    "Mount",
    "Networkd",
    "NetworkdUnit",
    "NodeGroup",
    "NodeUser",
    "Partition",
    "Passwd",
    "Raid",
    "Storage",
    "Systemd",
    "Timeouts",
    "Unit",
    "User",
    "UserCreate",
    "Verification",
]

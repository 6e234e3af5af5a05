# SPDX-License-Identifier: MIT
"""Pydantic models for the legacy (version 1) provisioning schema.

Legacy documents predate explicit schema versioning. Optional values follow
the "zero value means omitted" convention: strings default to ``""``, flags
to ``False`` and counters to ``0``. Files live inside the filesystem that
holds them and carry their contents inline.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, NonNegativeInt

from .base import SchemaModel


class Partition(SchemaModel):
    """Partition entry on a disk."""

    label: str = Field("", description="GPT partition label.")
    number: int = Field(0, description="1-based partition number.")
    size: NonNegativeInt = Field(0, description="Partition size in sectors.")
    start: NonNegativeInt = Field(0, description="Starting sector offset.")
    type_guid: str = Field("", description="GPT partition type GUID.")


class Disk(SchemaModel):
    """Block device and the partitions to create on it."""

    device: Annotated[str, Field(min_length=1, description="Device path.")]
    wipe_table: bool = Field(
        False, description="Wipe the partition table before partitioning."
    )
    partitions: list[Partition] = Field(
        default_factory=list, description="Partitions in creation order."
    )


class Raid(SchemaModel):
    """Software RAID array."""

    name: Annotated[str, Field(min_length=1, description="Array name.")]
    level: Annotated[str, Field(min_length=1, description="RAID level.")]
    devices: list[str] = Field(
        default_factory=list, description="Member device paths."
    )
    spares: NonNegativeInt = Field(0, description="Number of spare devices.")


class FilesystemCreate(SchemaModel):
    """Directive to run ``mkfs`` on the filesystem device."""

    force: bool = Field(False, description="Overwrite an existing filesystem.")
    options: list[str] = Field(
        default_factory=list, description="Extra options passed to mkfs."
    )


class File(SchemaModel):
    """File written to a filesystem with inline contents."""

    path: Annotated[str, Field(min_length=1, description="Absolute file path.")]
    contents: str = Field("", description="Literal file contents.")
    mode: NonNegativeInt = Field(0, description="Permission bits.")
    uid: NonNegativeInt = Field(0, description="Owning user id.")
    gid: NonNegativeInt = Field(0, description="Owning group id.")


class Filesystem(SchemaModel):
    """Filesystem definition together with the files placed on it."""

    device: Annotated[str, Field(min_length=1, description="Device path.")]
    format: Annotated[str, Field(min_length=1, description="Filesystem type.")]
    create: FilesystemCreate | None = Field(
        None, description="Create the filesystem when present."
    )
    files: list[File] = Field(
        default_factory=list, description="Files written to this filesystem."
    )


class Storage(SchemaModel):
    """Storage section of a legacy config."""

    disks: list[Disk] = Field(default_factory=list)
    arrays: list[Raid] = Field(default_factory=list, alias="raid")
    filesystems: list[Filesystem] = Field(default_factory=list)


class SystemdUnitDropIn(SchemaModel):
    """Drop-in fragment overriding part of a systemd unit."""

    name: Annotated[str, Field(min_length=1, description="Drop-in file name.")]
    contents: str = Field("", description="Drop-in file contents.")


class SystemdUnit(SchemaModel):
    """Systemd unit file."""

    name: Annotated[str, Field(min_length=1, description="Unit name.")]
    enable: bool = False
    mask: bool = False
    contents: str = Field("", description="Unit file contents.")
    drop_ins: list[SystemdUnitDropIn] = Field(
        default_factory=list, alias="dropins", description="Ordered drop-ins."
    )


class Systemd(SchemaModel):
    units: list[SystemdUnit] = Field(default_factory=list)


class NetworkdUnit(SchemaModel):
    """Networkd unit file."""

    name: Annotated[str, Field(min_length=1, description="Unit name.")]
    contents: str = Field("", description="Unit file contents.")


class Networkd(SchemaModel):
    units: list[NetworkdUnit] = Field(default_factory=list)


class UserCreate(SchemaModel):
    """Directive to create a user account with ``useradd``."""

    uid: NonNegativeInt | None = Field(None, description="Explicit user id.")
    gecos: str = ""
    home_dir: str = ""
    no_create_home: bool = False
    primary_group: str = ""
    groups: list[str] = Field(
        default_factory=list, description="Supplementary groups."
    )
    no_user_group: bool = False
    system: bool = False
    no_log_init: bool = False
    shell: str = ""


class User(SchemaModel):
    """User account."""

    name: Annotated[str, Field(min_length=1, description="Login name.")]
    password_hash: str = Field("", description="Hashed password.")
    ssh_authorized_keys: list[str] = Field(default_factory=list)
    create: UserCreate | None = Field(
        None, description="Create the user when present."
    )


class Group(SchemaModel):
    """Group account."""

    name: Annotated[str, Field(min_length=1, description="Group name.")]
    gid: NonNegativeInt | None = Field(None, description="Explicit group id.")
    password_hash: str = ""
    system: bool = False


class Passwd(SchemaModel):
    users: list[User] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)


class Config(SchemaModel):
    """Root of a legacy provisioning config."""

    ignition_version: Literal[1] | None = Field(
        None, description="Legacy integer version stamp, when written."
    )
    storage: Storage = Field(default_factory=Storage)
    systemd: Systemd = Field(default_factory=Systemd)
    networkd: Networkd = Field(default_factory=Networkd)
    passwd: Passwd = Field(default_factory=Passwd)


__all__ = [
    "Config",
    "Disk",
    "File",
    "Filesystem",
    "FilesystemCreate",
    "Group",
    "Networkd",
    "NetworkdUnit",
    "Partition",
    "Passwd",
    "Raid",
    "Storage",
    "Systemd",
    "SystemdUnit",
    "SystemdUnitDropIn",
    "User",
    "UserCreate",
]

# SPDX-License-Identifier: MIT
"""Translation of the storage section.

Disks and RAID arrays copy across unchanged. Legacy filesystems embed their
files; the current schema names each filesystem and lists files separately,
so every filesystem receives a synthetic name derived from its position and
its files are flattened into one list that points back at that name.
"""

from __future__ import annotations

from constants import FILESYSTEM_NAME_PREFIX
from models import v1, v2_0

from .content import encode_data_url


def filesystem_name(index: int) -> str:
    """Return the synthetic name of the legacy filesystem at ``index``."""

    return f"{FILESYSTEM_NAME_PREFIX}{index}"


def _translate_partition(partition: v1.Partition) -> v2_0.Partition:
    return v2_0.Partition(
        label=partition.label,
        number=partition.number,
        size=partition.size,
        start=partition.start,
        type_guid=partition.type_guid,
    )


def _translate_disk(disk: v1.Disk) -> v2_0.Disk:
    return v2_0.Disk(
        device=disk.device,
        wipe_table=disk.wipe_table,
        partitions=[_translate_partition(p) for p in disk.partitions],
    )


def _translate_raid(array: v1.Raid) -> v2_0.Raid:
    return v2_0.Raid(
        name=array.name,
        level=array.level,
        devices=list(array.devices),
        spares=array.spares,
    )


def _translate_filesystem(name: str, filesystem: v1.Filesystem) -> v2_0.Filesystem:
    create = None
    if filesystem.create is not None:
        create = v2_0.Create(
            force=filesystem.create.force,
            options=list(filesystem.create.options),
        )
    return v2_0.Filesystem(
        name=name,
        mount=v2_0.Mount(
            device=filesystem.device,
            format=filesystem.format,
            create=create,
        ),
    )


def _translate_file(filesystem: str, file: v1.File) -> v2_0.File:
    return v2_0.File(
        filesystem=filesystem,
        path=file.path,
        contents=v2_0.FileContents(source=encode_data_url(file.contents)),
        mode=file.mode,
        user=v2_0.NodeUser(id=file.uid),
        group=v2_0.NodeGroup(id=file.gid),
    )


def translate_storage(storage: v1.Storage) -> v2_0.Storage:
    """Return ``storage`` rewritten for the current schema.

    Filesystems keep their order and are named by position. Files are listed
    in filesystem-then-file order. Filesystems without files are still
    emitted.
    """

    filesystems: list[v2_0.Filesystem] = []
    files: list[v2_0.File] = []
    for index, filesystem in enumerate(storage.filesystems):
        name = filesystem_name(index)
        filesystems.append(_translate_filesystem(name, filesystem))
        files.extend(_translate_file(name, file) for file in filesystem.files)

    return v2_0.Storage(
        disks=[_translate_disk(disk) for disk in storage.disks],
        raid=[_translate_raid(array) for array in storage.arrays],
        filesystems=filesystems,
        files=files,
    )


__all__ = ["filesystem_name", "translate_storage"]

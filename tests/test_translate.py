# SPDX-License-Identifier: MIT
"""End-to-end tests for :func:`core.translate`."""

from __future__ import annotations

import pytest

from core import TranslationError, translate
from models import v1, v2_0

VERSION = v2_0.Ignition(version="2.0.0")


def _data(contents: str) -> v2_0.FileContents:
    return v2_0.FileContents(source=f"data:,{contents}")


CASES = [
    pytest.param(v1.Config(), v2_0.Config(ignition=VERSION), id="empty"),
    pytest.param(
        v1.Config(
            storage=v1.Storage(
                disks=[
                    v1.Disk(
                        device="/dev/sda",
                        wipe_table=True,
                        partitions=[
                            v1.Partition(
                                label="ROOT",
                                number=7,
                                size=100,
                                start=50,
                                type_guid="HI",
                            ),
                            v1.Partition(
                                label="DATA",
                                number=12,
                                size=1000,
                                start=300,
                                type_guid="LO",
                            ),
                        ],
                    ),
                    v1.Disk(device="/dev/sdb", wipe_table=True),
                ],
                arrays=[
                    v1.Raid(
                        name="fast",
                        level="raid0",
                        devices=["/dev/sdc", "/dev/sdd"],
                        spares=2,
                    ),
                    v1.Raid(
                        name="durable",
                        level="raid1",
                        devices=["/dev/sde", "/dev/sdf"],
                        spares=3,
                    ),
                ],
                filesystems=[
                    v1.Filesystem(
                        device="/dev/disk/by-partlabel/ROOT",
                        format="btrfs",
                        create=v1.FilesystemCreate(force=True, options=["-L", "ROOT"]),
                        files=[
                            v1.File(
                                path="/opt/file1",
                                contents="file1",
                                mode=0o664,
                                uid=500,
                                gid=501,
                            ),
                            v1.File(
                                path="/opt/file2",
                                contents="file2",
                                mode=0o644,
                                uid=502,
                                gid=503,
                            ),
                        ],
                    ),
                    v1.Filesystem(
                        device="/dev/disk/by-partlabel/DATA",
                        format="ext4",
                        files=[
                            v1.File(
                                path="/opt/file3",
                                contents="file3",
                                mode=0o400,
                                uid=1000,
                                gid=1001,
                            )
                        ],
                    ),
                ],
            )
        ),
        v2_0.Config(
            ignition=VERSION,
            storage=v2_0.Storage(
                disks=[
                    v2_0.Disk(
                        device="/dev/sda",
                        wipe_table=True,
                        partitions=[
                            v2_0.Partition(
                                label="ROOT",
                                number=7,
                                size=100,
                                start=50,
                                type_guid="HI",
                            ),
                            v2_0.Partition(
                                label="DATA",
                                number=12,
                                size=1000,
                                start=300,
                                type_guid="LO",
                            ),
                        ],
                    ),
                    v2_0.Disk(device="/dev/sdb", wipe_table=True),
                ],
                raid=[
                    v2_0.Raid(
                        name="fast",
                        level="raid0",
                        devices=["/dev/sdc", "/dev/sdd"],
                        spares=2,
                    ),
                    v2_0.Raid(
                        name="durable",
                        level="raid1",
                        devices=["/dev/sde", "/dev/sdf"],
                        spares=3,
                    ),
                ],
                filesystems=[
                    v2_0.Filesystem(
                        name="_translate-filesystem-0",
                        mount=v2_0.Mount(
                            device="/dev/disk/by-partlabel/ROOT",
                            format="btrfs",
                            create=v2_0.Create(force=True, options=["-L", "ROOT"]),
                        ),
                    ),
                    v2_0.Filesystem(
                        name="_translate-filesystem-1",
                        mount=v2_0.Mount(
                            device="/dev/disk/by-partlabel/DATA", format="ext4"
                        ),
                    ),
                ],
                files=[
                    v2_0.File(
                        filesystem="_translate-filesystem-0",
                        path="/opt/file1",
                        user=v2_0.NodeUser(id=500),
                        group=v2_0.NodeGroup(id=501),
                        mode=0o664,
                        contents=_data("file1"),
                    ),
                    v2_0.File(
                        filesystem="_translate-filesystem-0",
                        path="/opt/file2",
                        user=v2_0.NodeUser(id=502),
                        group=v2_0.NodeGroup(id=503),
                        mode=0o644,
                        contents=_data("file2"),
                    ),
                    v2_0.File(
                        filesystem="_translate-filesystem-1",
                        path="/opt/file3",
                        user=v2_0.NodeUser(id=1000),
                        group=v2_0.NodeGroup(id=1001),
                        mode=0o400,
                        contents=_data("file3"),
                    ),
                ],
            ),
        ),
        id="storage",
    ),
    pytest.param(
        v1.Config(
            systemd=v1.Systemd(
                units=[
                    v1.SystemdUnit(
                        name="test1.service",
                        enable=True,
                        contents="test1 contents",
                        drop_ins=[
                            v1.SystemdUnitDropIn(
                                name="conf1.conf", contents="conf1 contents"
                            ),
                            v1.SystemdUnitDropIn(
                                name="conf2.conf", contents="conf2 contents"
                            ),
                        ],
                    ),
                    v1.SystemdUnit(
                        name="test2.service", mask=True, contents="test2 contents"
                    ),
                ]
            )
        ),
        v2_0.Config(
            ignition=VERSION,
            systemd=v2_0.Systemd(
                units=[
                    v2_0.Unit(
                        name="test1.service",
                        enable=True,
                        contents="test1 contents",
                        dropins=[
                            v2_0.Dropin(name="conf1.conf", contents="conf1 contents"),
                            v2_0.Dropin(name="conf2.conf", contents="conf2 contents"),
                        ],
                    ),
                    v2_0.Unit(
                        name="test2.service", mask=True, contents="test2 contents"
                    ),
                ]
            ),
        ),
        id="systemd",
    ),
    pytest.param(
        v1.Config(
            networkd=v1.Networkd(
                units=[
                    v1.NetworkdUnit(name="test1.network", contents="test1 contents"),
                    v1.NetworkdUnit(name="test2.network", contents="test2 contents"),
                ]
            )
        ),
        v2_0.Config(
            ignition=VERSION,
            networkd=v2_0.Networkd(
                units=[
                    v2_0.NetworkdUnit(name="test1.network", contents="test1 contents"),
                    v2_0.NetworkdUnit(name="test2.network", contents="test2 contents"),
                ]
            ),
        ),
        id="networkd",
    ),
    pytest.param(
        v1.Config(
            passwd=v1.Passwd(
                users=[
                    v1.User(
                        name="user 1",
                        password_hash="password 1",
                        ssh_authorized_keys=["key1", "key2"],
                    ),
                    v1.User(
                        name="user 2",
                        password_hash="password 2",
                        ssh_authorized_keys=["key3", "key4"],
                        create=v1.UserCreate(
                            uid=123,
                            gecos="gecos",
                            home_dir="/home/user 2",
                            no_create_home=True,
                            primary_group="wheel",
                            groups=["wheel", "plugdev"],
                            no_user_group=True,
                            system=True,
                            no_log_init=True,
                            shell="/bin/zsh",
                        ),
                    ),
                    v1.User(
                        name="user 3",
                        password_hash="password 3",
                        ssh_authorized_keys=["key5", "key6"],
                        create=v1.UserCreate(),
                    ),
                ],
                groups=[
                    v1.Group(
                        name="group 1",
                        gid=1000,
                        password_hash="password 1",
                        system=True,
                    ),
                    v1.Group(name="group 2", password_hash="password 2"),
                ],
            )
        ),
        v2_0.Config(
            ignition=VERSION,
            passwd=v2_0.Passwd(
                users=[
                    v2_0.User(
                        name="user 1",
                        password_hash="password 1",
                        ssh_authorized_keys=["key1", "key2"],
                    ),
                    v2_0.User(
                        name="user 2",
                        password_hash="password 2",
                        ssh_authorized_keys=["key3", "key4"],
                        create=v2_0.UserCreate(
                            uid=123,
                            gecos="gecos",
                            home_dir="/home/user 2",
                            no_create_home=True,
                            primary_group="wheel",
                            groups=["wheel", "plugdev"],
                            no_user_group=True,
                            system=True,
                            no_log_init=True,
                            shell="/bin/zsh",
                        ),
                    ),
                    v2_0.User(
                        name="user 3",
                        password_hash="password 3",
                        ssh_authorized_keys=["key5", "key6"],
                        create=v2_0.UserCreate(),
                    ),
                ],
                groups=[
                    v2_0.Group(
                        name="group 1",
                        gid=1000,
                        password_hash="password 1",
                        system=True,
                    ),
                    v2_0.Group(name="group 2", password_hash="password 2"),
                ],
            ),
        ),
        id="passwd",
    ),
]


@pytest.mark.parametrize(("legacy", "expected"), CASES)
def test_translate_from_legacy(legacy: v1.Config, expected: v2_0.Config) -> None:
    assert translate(legacy) == expected


def test_translate_disk_only_keeps_empty_sections() -> None:
    """A disk-only config yields empty, not missing, storage lists."""
    legacy = v1.Config(
        storage=v1.Storage(
            disks=[
                v1.Disk(
                    device="/dev/sda",
                    wipe_table=True,
                    partitions=[
                        v1.Partition(label="ROOT", number=1, size=100, start=0),
                        v1.Partition(label="DATA", number=2, size=200, start=100),
                    ],
                )
            ]
        )
    )

    document = translate(legacy).to_document()

    assert document["ignition"]["version"] == "2.0.0"
    storage = document["storage"]
    assert [disk["device"] for disk in storage["disks"]] == ["/dev/sda"]
    assert storage["filesystems"] == []
    assert storage["files"] == []
    assert storage["raid"] == []


def test_translate_does_not_mutate_input(storage_config: v1.Config) -> None:
    before = storage_config.model_dump()

    result = translate(storage_config)

    assert storage_config.model_dump() == before
    assert result.storage.files[0].path == "/opt/file1"


def test_translate_is_deterministic(storage_config: v1.Config) -> None:
    first = translate(storage_config)
    second = translate(storage_config)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_translate_does_not_share_lists_with_input() -> None:
    legacy = v1.Config(
        passwd=v1.Passwd(users=[v1.User(name="core", ssh_authorized_keys=["k"])])
    )

    result = translate(legacy)

    assert result.passwd.users[0].ssh_authorized_keys == ["k"]
    assert (
        result.passwd.users[0].ssh_authorized_keys
        is not legacy.passwd.users[0].ssh_authorized_keys
    )


def test_translate_ignores_legacy_version_stamp() -> None:
    result = translate(v1.Config(ignition_version=1))
    assert result.ignition.version == "2.0.0"


@pytest.mark.parametrize("value", [None, {}, "config", v2_0.Config(ignition=VERSION)])
def test_translate_rejects_non_legacy_input(value: object) -> None:
    with pytest.raises(TranslationError):
        translate(value)  # type: ignore[arg-type]

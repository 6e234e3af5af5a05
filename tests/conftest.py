# SPDX-License-Identifier: MIT
"""Test configuration for ignition-translate.

Keeps Logfire output local and isolates tests from ``IGN_*`` variables set in
the developer's environment.
"""

from __future__ import annotations

import os

import logfire
import pytest

from models import v1

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Remove application environment overrides for each test."""

    for var in list(os.environ):
        if var.startswith("IGN_"):
            monkeypatch.delenv(var)


@pytest.fixture()
def storage_config() -> v1.Config:
    """Legacy config with two filesystems holding three files."""

    return v1.Config(
        storage=v1.Storage(
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
            ]
        )
    )

# SPDX-License-Identifier: MIT
"""Translation of the passwd section."""

from __future__ import annotations

from models import v1, v2_0


def _translate_user_create(create: v1.UserCreate | None) -> v2_0.UserCreate | None:
    """Return the create directive, keeping absence and presence distinct.

    A legacy directive with every field at its default still yields a present
    directive; only a missing one stays missing.
    """

    if create is None:
        return None
    return v2_0.UserCreate(
        uid=create.uid,
        gecos=create.gecos,
        home_dir=create.home_dir,
        no_create_home=create.no_create_home,
        primary_group=create.primary_group,
        groups=list(create.groups),
        no_user_group=create.no_user_group,
        system=create.system,
        no_log_init=create.no_log_init,
        shell=create.shell,
    )


def _translate_user(user: v1.User) -> v2_0.User:
    return v2_0.User(
        name=user.name,
        password_hash=user.password_hash,
        ssh_authorized_keys=list(user.ssh_authorized_keys),
        create=_translate_user_create(user.create),
    )


def _translate_group(group: v1.Group) -> v2_0.Group:
    return v2_0.Group(
        name=group.name,
        gid=group.gid,
        password_hash=group.password_hash,
        system=group.system,
    )


def translate_passwd(passwd: v1.Passwd) -> v2_0.Passwd:
    """Return users and groups rewritten for the current schema."""

    return v2_0.Passwd(
        users=[_translate_user(user) for user in passwd.users],
        groups=[_translate_group(group) for group in passwd.groups],
    )


__all__ = ["translate_passwd"]

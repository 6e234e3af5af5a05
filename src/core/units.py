# SPDX-License-Identifier: MIT
"""Translation of the systemd and networkd sections."""

from __future__ import annotations

from models import v1, v2_0


def _translate_unit(unit: v1.SystemdUnit) -> v2_0.Unit:
    return v2_0.Unit(
        name=unit.name,
        enable=unit.enable,
        mask=unit.mask,
        contents=unit.contents,
        dropins=[
            v2_0.Dropin(name=dropin.name, contents=dropin.contents)
            for dropin in unit.drop_ins
        ],
    )


def translate_systemd(systemd: v1.Systemd) -> v2_0.Systemd:
    """Return systemd units with their drop-ins, order preserved."""

    return v2_0.Systemd(units=[_translate_unit(unit) for unit in systemd.units])


def translate_networkd(networkd: v1.Networkd) -> v2_0.Networkd:
    """Return networkd units, order preserved."""

    return v2_0.Networkd(
        units=[
            v2_0.NetworkdUnit(name=unit.name, contents=unit.contents)
            for unit in networkd.units
        ]
    )


__all__ = ["translate_networkd", "translate_systemd"]

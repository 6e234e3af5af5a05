# SPDX-License-Identifier: MIT
"""Translation of legacy provisioning configs to the 2.0.0 schema.

:func:`translate` is a pure function: it builds a new document from the
legacy one without mutating it and returns the same result for the same
input. Each section is rewritten by its own mapper; the only link between
sections is the synthetic filesystem name shared by filesystems and files.
"""

from __future__ import annotations

import logfire

from models import TARGET_VERSION, v1, v2_0

from .errors import TranslationError
from .passwd import translate_passwd
from .storage import translate_storage
from .units import translate_networkd, translate_systemd


def translate(config: v1.Config) -> v2_0.Config:
    """Return ``config`` expressed in the 2.0.0 schema.

    Args:
        config: Validated legacy configuration.

    Returns:
        A fully populated 2.0.0 configuration stamped with
        :data:`models.TARGET_VERSION`.

    Raises:
        TranslationError: If ``config`` is not a legacy configuration model.

    Examples:
        >>> translate(v1.Config()).ignition.version
        '2.0.0'
    """

    if not isinstance(config, v1.Config):
        raise TranslationError(
            f"Expected a legacy config, got {type(config).__name__}"
        )

    with logfire.span("translate.v1_to_v2_0"):
        storage = translate_storage(config.storage)
        result = v2_0.Config(
            ignition=v2_0.Ignition(version=str(TARGET_VERSION)),
            storage=storage,
            systemd=translate_systemd(config.systemd),
            networkd=translate_networkd(config.networkd),
            passwd=translate_passwd(config.passwd),
        )
        logfire.debug(
            "Translated config",
            version=result.ignition.version,
            filesystems=len(storage.filesystems),
            files=len(storage.files),
            units=len(result.systemd.units),
            users=len(result.passwd.users),
        )
        return result


__all__ = ["translate"]

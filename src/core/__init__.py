"""Core translation of legacy provisioning configs.

Exports:
    translate: Convert a legacy config to the 2.0.0 schema.
    translate_storage: Rewrite the storage section.
    translate_systemd: Rewrite the systemd section.
    translate_networkd: Rewrite the networkd section.
    translate_passwd: Rewrite the passwd section.
    filesystem_name: Synthetic name of a legacy filesystem by position.
    encode_data_url: Build an inline content reference.
    decode_data_url: Recover the literal from an inline content reference.
    TranslationError: Raised when the translator is handed unmappable input.
"""

from .content import decode_data_url, encode_data_url
from .errors import TranslationError
from .passwd import translate_passwd
from .storage import filesystem_name, translate_storage
from .translator import translate
from .units import translate_networkd, translate_systemd

__all__ = [
    "TranslationError",
    "decode_data_url",
    "encode_data_url",
    "filesystem_name",
    "translate",
    "translate_networkd",
    "translate_passwd",
    "translate_storage",
    "translate_systemd",
]

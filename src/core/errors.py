# SPDX-License-Identifier: MIT
"""Exceptions raised by the translation core."""

from __future__ import annotations


class TranslationError(RuntimeError):
    """Input the translator cannot map, indicating a defect or schema mismatch.

    Translation of a valid legacy config never raises this; it signals a
    programming error and aborts the whole translation.
    """


__all__ = ["TranslationError"]

# SPDX-License-Identifier: MIT
"""Inline ``data`` URL content references."""

from __future__ import annotations

from constants import DATA_URL_PREFIX


def encode_data_url(contents: str) -> str:
    """Return a content reference carrying ``contents`` inline.

    The literal is appended unescaped after ``data:,`` so existing consumers
    of translated configs receive byte-identical sources.

    Examples:
        >>> encode_data_url("file1")
        'data:,file1'
    """

    return f"{DATA_URL_PREFIX}{contents}"


def decode_data_url(source: str) -> str:
    """Return the literal contents of an inline content reference.

    Raises:
        ValueError: If ``source`` is not an inline ``data:,`` reference.
    """

    if not source.startswith(DATA_URL_PREFIX):
        raise ValueError(f"Not an inline data URL: {source!r}")
    return source[len(DATA_URL_PREFIX) :]


__all__ = ["decode_data_url", "encode_data_url"]

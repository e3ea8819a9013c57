# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). reqlite exposes headers as plain
dicts keyed by the lower-cased name, and hands them to the transport as `"name: value"` lines.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping; later duplicates win."""
    if not headers:
        return {}
    return {str(key).lower(): value for key, value in headers.items()}


def to_wire_lines(headers: Mapping[str, str] | None) -> list[str]:
    """Collapse a header mapping into `"name: value"` lines, preserving order."""
    if not headers:
        return []
    return [f"{key}: {value}" for key, value in headers.items()]


def parse_header_lines(lines: Iterable[str]) -> dict[str, str]:
    """
    Fold raw response header lines into a lowercase-keyed mapping.

    Each line is split on its first colon. Lines without one (the status line,
    the blank terminator) are skipped.
    """
    out: dict[str, str] = {}
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        out[name.strip().lower()] = value.strip()
    return out


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    lower = name.lower()
    if lower in headers:
        return headers[lower]

    for key, value in headers.items():
        if str(key).lower() == lower:
            return value

    return default


__all__ = ["header_value", "normalize_headers", "parse_header_lines", "to_wire_lines"]

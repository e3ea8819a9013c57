# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request body encoding for POST/PUT."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


def media_type(content_type: str | None) -> str:
    """Return the bare, lower-cased media type of a Content-Type value."""
    return (content_type or "").split(";", 1)[0].strip().lower()


def is_json_content_type(content_type: str | None) -> bool:
    return media_type(content_type) == JSON_CONTENT_TYPE


def _form_value(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def encode_form(fields: Any) -> str:
    """
    URL-encode a field mapping as `application/x-www-form-urlencoded`.

    Anything that is not a mapping encodes to an empty body.
    """
    if not isinstance(fields, Mapping):
        return ""
    return "&".join(f"{quote_plus(_form_value(key))}={quote_plus(_form_value(value))}" for key, value in fields.items())


def encode_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def encode_body(body: Any, content_type: str | None) -> str:
    """Encode `body` according to the resolved Content-Type header."""
    if is_json_content_type(content_type):
        return encode_json(body)
    return encode_form(body)


__all__ = [
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "encode_body",
    "encode_form",
    "encode_json",
    "is_json_content_type",
    "media_type",
]

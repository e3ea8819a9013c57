# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across reqlite."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import ErrorCategory, MalformedJSONError

Headers = dict[str, str]

REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})
PERMANENT_REDIRECT_CODES = frozenset({301, 308})

# Status code reported when the transport never received a response.
NO_RESPONSE_STATUS = 0


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        return self in (Method.POST, Method.PUT)


@dataclass
class RequestSpec:
    """Per-call request description, consumed by RequestDispatcher."""

    method: Method
    url: str
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    allow_redirects: bool = True
    verify: bool = True


@dataclass
class TransportOptions:
    """Transport settings assembled for a single request."""

    url: str
    header_lines: list[str] = field(default_factory=list)
    follow_redirects: bool = True
    verify_peer: bool = False
    ca_info: str | None = None
    return_transfer: bool = True
    post: bool = False
    custom_method: str | None = None
    post_body: str | None = None

    @property
    def method(self) -> str:
        """Effective HTTP verb: explicit override first, then POST flag, else GET."""
        if self.custom_method:
            return self.custom_method
        return "POST" if self.post else "GET"


@dataclass
class TransportResult:
    """
    Raw outcome of a transport execution.

    Either a completed exchange (status code, raw header lines, body) or a
    failure carrying diagnostic details, in which case `status_code` is
    NO_RESPONSE_STATUS and `body` is empty.
    """

    status_code: int = NO_RESPONSE_STATUS
    header_lines: list[str] = field(default_factory=list)
    body: str = ""
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def failed(self) -> bool:
        return self.error_type is not None

    @classmethod
    def failure(cls, exc: Exception, category: ErrorCategory) -> TransportResult:
        return cls(
            error_message=str(exc) or type(exc).__name__,
            error_type=type(exc).__name__,
            error_category=category,
        )


@dataclass
class Response:
    """Response returned by the verb functions."""

    url: str
    status_code: int
    headers: Headers = field(default_factory=dict)
    text: str = ""
    ok: bool = True
    is_redirect: bool = False
    is_permanent_redirect: bool = False
    next: str | None = None
    error_message: str | None = None
    error_type: str | None = None

    @property
    def content(self) -> str:
        """Alias of `text`."""
        return self.text

    def json(self) -> Any:
        """Decode the body as JSON, raising MalformedJSONError on invalid input."""
        try:
            return json.loads(self.text)
        except json.JSONDecodeError as exc:
            raise MalformedJSONError(f"Malformed JSON in response from {self.url}: {exc}") from exc

    asJson = json


__all__ = [
    "Headers",
    "Method",
    "NO_RESPONSE_STATUS",
    "PERMANENT_REDIRECT_CODES",
    "REDIRECT_CODES",
    "RequestSpec",
    "Response",
    "TransportOptions",
    "TransportResult",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP layer exports."""

from .adapters import StubTransport
from .body import encode_body, encode_form, encode_json
from .client import TransportEngine, create_default_transport
from .dispatch import RequestDispatcher
from .headers import header_value, normalize_headers, parse_header_lines, to_wire_lines
from .httpx_client import HttpxTransport
from .models import Headers, Method, RequestSpec, Response, TransportOptions, TransportResult
from .response import interpret
from .transport import configure, url_is_https

__all__ = [
    "Headers",
    "HttpxTransport",
    "Method",
    "RequestDispatcher",
    "RequestSpec",
    "Response",
    "StubTransport",
    "TransportEngine",
    "TransportOptions",
    "TransportResult",
    "configure",
    "create_default_transport",
    "encode_body",
    "encode_form",
    "encode_json",
    "header_value",
    "interpret",
    "normalize_headers",
    "parse_header_lines",
    "to_wire_lines",
    "url_is_https",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
reqlite package entrypoint.

A small HTTP client offering requests-style verb functions over an injectable
transport engine (httpx by default). Request and response objects are modeled
with typed dataclasses.
"""

from .api import DELETE, GET, POST, PUT, delete, get, get_dispatcher, post, put, request, set_dispatcher
from .config import TlsPolicy, load_tls_policy
from .errors import ErrorCategory, MalformedJSONError
from .http import HttpxTransport, RequestDispatcher, Response, TransportEngine
from .log import setup_logging
from .version import __version__

__all__ = [
    "DELETE",
    "ErrorCategory",
    "GET",
    "HttpxTransport",
    "MalformedJSONError",
    "POST",
    "PUT",
    "RequestDispatcher",
    "Response",
    "TlsPolicy",
    "TransportEngine",
    "__version__",
    "delete",
    "get",
    "get_dispatcher",
    "load_tls_policy",
    "post",
    "put",
    "request",
    "set_dispatcher",
    "setup_logging",
]

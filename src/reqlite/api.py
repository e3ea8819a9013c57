# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Verb functions: GET, POST, PUT and DELETE."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .http.dispatch import RequestDispatcher
from .http.models import Method, RequestSpec, Response
from .http.response import interpret

_default_dispatcher: RequestDispatcher | None = None


def get_dispatcher() -> RequestDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = RequestDispatcher()
    return _default_dispatcher


def set_dispatcher(dispatcher: RequestDispatcher | None) -> None:
    """Replace the process-wide dispatcher; None resets to a lazily built default."""
    global _default_dispatcher
    _default_dispatcher = dispatcher


def request(
    method: Method | str,
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    allow_redirects: bool = True,
    verify: bool = True,
) -> Response:
    """Send a single request and return its Response."""
    spec = RequestSpec(
        method=method if isinstance(method, Method) else Method(method.upper()),
        url=url,
        body=body,
        headers=dict(headers or {}),
        allow_redirects=allow_redirects,
        verify=verify,
    )
    result = get_dispatcher().dispatch(spec)
    return interpret(result, url)


def GET(url: str, headers: Mapping[str, str] | None = None, allow_redirects: bool = True, verify: bool = True) -> Response:
    """Send a GET request."""
    return request(Method.GET, url, None, headers, allow_redirects, verify)


def POST(
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    allow_redirects: bool = True,
    verify: bool = True,
) -> Response:
    """
    Send a POST request.

    `body` is a field mapping for form posts, or any JSON-serializable value
    when the `Content-Type` header is `application/json`.
    """
    return request(Method.POST, url, body, headers, allow_redirects, verify)


def PUT(
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    allow_redirects: bool = True,
    verify: bool = True,
) -> Response:
    """Send a PUT request; `body` is handled as for POST."""
    return request(Method.PUT, url, body, headers, allow_redirects, verify)


def DELETE(url: str, headers: Mapping[str, str] | None = None, allow_redirects: bool = True, verify: bool = True) -> Response:
    return request(Method.DELETE, url, None, headers, allow_redirects, verify)


get = GET
post = POST
put = PUT
delete = DELETE

__all__ = [
    "DELETE",
    "GET",
    "POST",
    "PUT",
    "delete",
    "get",
    "get_dispatcher",
    "post",
    "put",
    "request",
    "set_dispatcher",
]

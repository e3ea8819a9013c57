# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Assemble TransportOptions from request parameters and the TLS policy."""

from __future__ import annotations

from collections.abc import Mapping

from ..config import TlsPolicy
from .headers import to_wire_lines
from .models import Method, TransportOptions


def url_is_https(url: str) -> bool:
    """Return True when the URL text starts with the literal `https://` prefix."""
    return str(url or "").startswith("https://")


def configure(
    method: Method,
    url: str,
    headers: Mapping[str, str] | None,
    *,
    allow_redirects: bool,
    verify: bool,
    policy: TlsPolicy,
) -> TransportOptions:
    """
    Build transport options for one request.

    Peer verification is only ever enabled when the policy's master switch is on,
    the URL is https and the caller asked for it. Plain http never verifies.
    """
    if not url_is_https(url):
        verify = False

    options = TransportOptions(
        url=url,
        header_lines=to_wire_lines(headers),
        follow_redirects=bool(allow_redirects),
        verify_peer=False,
        return_transfer=True,
    )
    if policy.do_verification:
        options.verify_peer = verify
        options.ca_info = policy.cert_path or None

    if method in (Method.PUT, Method.DELETE):
        options.custom_method = method.value
    elif method is Method.POST:
        options.post = True
    return options


__all__ = ["configure", "url_is_https"]

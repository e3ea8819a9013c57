# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed TransportEngine implementation."""

from __future__ import annotations

import ssl

import httpx

from ..config import DEFAULT_USER_AGENT
from ..errors import categorize_exception
from ..log import get_logger
from .client import TransportEngine
from .models import TransportOptions, TransportResult

logger = get_logger(__name__)


def _header_pairs(lines: list[str]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        pairs.append((name.strip(), value.strip()))
    return pairs


def _verify_setting(options: TransportOptions) -> ssl.SSLContext | bool:
    if not options.verify_peer:
        return False
    if options.ca_info:
        return ssl.create_default_context(cafile=options.ca_info)
    return True


class HttpxTransport(TransportEngine):
    """
    Synchronous httpx transport.

    A fresh httpx.Client is opened for every request and closed before
    `execute` returns, so nothing is shared between calls.
    """

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT):
        self.user_agent = user_agent

    def execute(self, options: TransportOptions) -> TransportResult:
        headers = _header_pairs(options.header_lines)
        if not any(name.lower() == "user-agent" for name, _ in headers):
            headers.append(("User-Agent", self.user_agent))
        body = options.post_body.encode("utf-8") if options.post_body is not None else None

        try:
            with httpx.Client(
                follow_redirects=options.follow_redirects,
                verify=_verify_setting(options),
                timeout=None,
            ) as client:
                resp = client.request(options.method, options.url, headers=headers, content=body)
                header_lines = [f"{resp.http_version} {resp.status_code} {resp.reason_phrase}"]
                header_lines.extend(f"{name}: {value}" for name, value in resp.headers.multi_items())
                text = ""
                if options.return_transfer:
                    encoding = resp.encoding or "utf-8"
                    try:
                        text = resp.content.decode(encoding, errors="replace")
                    except LookupError:
                        text = resp.content.decode("utf-8", errors="replace")
        except Exception as exc:  # noqa: BLE001
            logger.debug("httpx raised %s for %s", type(exc).__name__, options.url, exc_info=True)
            return TransportResult.failure(exc, categorize_exception(exc))

        logger.debug("%s %s -> %s", options.method, options.url, resp.status_code)
        return TransportResult(
            status_code=resp.status_code,
            header_lines=header_lines,
            body=text,
        )

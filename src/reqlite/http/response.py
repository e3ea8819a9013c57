# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Lift a raw TransportResult into a Response."""

from __future__ import annotations

from .headers import parse_header_lines
from .models import PERMANENT_REDIRECT_CODES, REDIRECT_CODES, Response, TransportResult


def interpret(result: TransportResult, url: str) -> Response:
    headers = parse_header_lines(result.header_lines)
    status = int(result.status_code)
    is_redirect = status in REDIRECT_CODES
    return Response(
        url=url,
        status_code=status,
        headers=headers,
        text=result.body or "",
        ok=not 400 <= status < 600,
        is_redirect=is_redirect,
        is_permanent_redirect=status in PERMANENT_REDIRECT_CODES,
        next=headers.get("location") if is_redirect else None,
        error_message=result.error_message,
        error_type=result.error_type,
    )


__all__ = ["interpret"]

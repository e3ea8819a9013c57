# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn a RequestSpec into a single transport round trip."""

from __future__ import annotations

from ..config import TlsPolicy, load_tls_policy
from ..errors import error_category_to_reason
from ..log import get_logger
from .body import FORM_CONTENT_TYPE, encode_body
from .client import TransportEngine, create_default_transport
from .headers import header_value, normalize_headers
from .models import RequestSpec, TransportResult
from .transport import configure

logger = get_logger(__name__)


class RequestDispatcher:
    """
    Configure, encode and execute requests against a TransportEngine.

    Transport failures never raise out of `dispatch`; they are logged and the
    failed TransportResult is returned as-is.
    """

    def __init__(self, transport: TransportEngine | None = None, policy: TlsPolicy | None = None):
        self.transport = transport or create_default_transport()
        self.policy = policy or load_tls_policy()

    def dispatch(self, spec: RequestSpec) -> TransportResult:
        headers = normalize_headers(spec.headers)
        if spec.method.has_body:
            headers.setdefault("content-type", FORM_CONTENT_TYPE)

        options = configure(
            spec.method,
            spec.url,
            headers,
            allow_redirects=spec.allow_redirects,
            verify=spec.verify,
            policy=self.policy,
        )
        if spec.method.has_body:
            options.post_body = encode_body(spec.body, header_value(headers, "content-type"))

        logger.debug("%s %s (verify_peer=%s)", options.method, spec.url, options.verify_peer)
        result = self.transport.execute(options)
        if result.failed:
            logger.warning(
                "%s %s failed: %s (%s: %s)",
                options.method,
                spec.url,
                error_category_to_reason(result.error_category),
                result.error_type,
                result.error_message,
            )
        return result


__all__ = ["RequestDispatcher"]

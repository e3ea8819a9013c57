# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport engine abstraction and factory."""

from typing import Protocol

from .models import TransportOptions, TransportResult


class TransportEngine(Protocol):
    """Minimal protocol for executing a configured request."""

    def execute(self, options: TransportOptions) -> TransportResult: ...


def create_default_transport() -> TransportEngine:
    """Factory for the default httpx-backed transport."""
    from .httpx_client import HttpxTransport

    return HttpxTransport()

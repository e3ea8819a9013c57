# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Alternate TransportEngine implementations."""

from __future__ import annotations

from ..errors import ErrorCategory
from .client import TransportEngine
from .models import TransportOptions, TransportResult


class StubTransport(TransportEngine):
    """Deterministic, programmable TransportEngine for tests."""

    def __init__(self, results: dict[str, TransportResult] | None = None):
        self._results = results or {}
        self.executed: list[TransportOptions] = []

    def add(self, url: str, result: TransportResult) -> None:
        self._results[url] = result

    def execute(self, options: TransportOptions) -> TransportResult:
        self.executed.append(options)
        if options.url in self._results:
            return self._results[options.url]
        return TransportResult(
            error_message="No stubbed result configured",
            error_type="LookupError",
            error_category=ErrorCategory.UNKNOWN_ERROR,
        )

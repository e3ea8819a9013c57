# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for reqlite."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"reqlite/{__version__}"


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip()


@dataclass(frozen=True)
class TlsPolicy:
    """
    Process-wide TLS verification policy.

    `do_verification` is the master switch: unless it is on, a per-call
    `verify=True` never enables peer verification. `cert_path` is the CA bundle
    handed to the transport whenever the switch is on.
    """

    do_verification: bool = False
    cert_path: str = ""

    @classmethod
    def from_env(cls) -> "TlsPolicy":
        """Create a policy from environment variables (evaluated at call time)."""
        return cls(
            do_verification=_bool_env("REQLITE_TLS_VERIFY", cls.do_verification),
            cert_path=_str_env("REQLITE_CA_BUNDLE", cls.cert_path),
        )


def load_tls_policy() -> TlsPolicy:
    """Load the TLS policy from environment with verification off by default."""
    return TlsPolicy.from_env()

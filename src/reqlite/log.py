# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for reqlite.

Every module logs below the `reqlite` package logger, so transport diagnostics can
be raised or silenced independently of the application's own logging.
"""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "reqlite"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure standard logging for scripts using reqlite.

    `level` falls back to REQLITE_LOG_LEVEL (read at call time), then WARNING.
    Returns the package logger with that level applied.
    """
    effective_level = (level or os.getenv("REQLITE_LOG_LEVEL") or "WARNING").upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    return package_logger


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "get_logger", "setup_logging"]

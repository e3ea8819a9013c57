# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx
import pytest

from reqlite import config, log
from reqlite.config import DEFAULT_USER_AGENT, TlsPolicy
from reqlite.errors import ErrorCategory, categorize_exception, error_category_to_reason
from reqlite.version import __version__


def test_tls_policy_defaults_to_off(monkeypatch):
    monkeypatch.delenv("REQLITE_TLS_VERIFY", raising=False)
    monkeypatch.delenv("REQLITE_CA_BUNDLE", raising=False)
    policy = config.load_tls_policy()
    assert policy == TlsPolicy(do_verification=False, cert_path="")


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("true", True), ("on", True), ("no", False), ("", False)])
def test_tls_policy_env_switch(monkeypatch, raw, expected):
    monkeypatch.setenv("REQLITE_TLS_VERIFY", raw)
    monkeypatch.setenv("REQLITE_CA_BUNDLE", " /etc/ssl/ca.pem ")
    policy = config.load_tls_policy()
    assert policy.do_verification is expected
    assert policy.cert_path == "/etc/ssl/ca.pem"


def test_tls_policy_is_immutable():
    policy = TlsPolicy()
    with pytest.raises(AttributeError):
        policy.do_verification = True  # type: ignore[misc]


def test_default_user_agent_carries_version():
    assert DEFAULT_USER_AGENT == f"reqlite/{__version__}"


def test_categorize_exception_variants():
    request = httpx.Request("GET", "http://example.test/")
    assert categorize_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused", request=request)) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.UnsupportedProtocol("ftp")) is ErrorCategory.INVALID_URL
    assert categorize_exception(ssl.SSLError("bad cert")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("no host")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionResetError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("?")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_unwraps_cause():
    try:
        try:
            raise socket.gaierror("Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("dns") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.SSL_ERROR) == "TLS/certificate issue"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


@pytest.fixture
def package_logger():
    logger = logging.getLogger("reqlite")
    original = logger.level
    yield logger
    logger.setLevel(original)


def test_setup_logging_uses_requested_level(monkeypatch, package_logger):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    assert log.setup_logging("debug") is package_logger
    assert calls["level"] == logging.DEBUG
    assert calls["format"] == log.LOG_FORMAT
    assert package_logger.level == logging.DEBUG

    log.setup_logging("bogus")
    assert calls["level"] == logging.WARNING
    assert package_logger.level == logging.WARNING


def test_setup_logging_reads_env_at_call_time(monkeypatch, package_logger):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    monkeypatch.setenv("REQLITE_LOG_LEVEL", "info")
    log.setup_logging()
    assert package_logger.level == logging.INFO


def test_get_logger_nests_under_package():
    assert log.get_logger("reqlite.http.dispatch").name == "reqlite.http.dispatch"
    assert log.get_logger("reqlite").name == "reqlite"
    assert log.get_logger("scripts.fetch").name == "reqlite.scripts.fetch"

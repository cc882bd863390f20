# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from boorutags import config
from boorutags.config import DEFAULT_USER_AGENT, QualityFilter
from boorutags.errors import (
    GENERIC_FETCH_ERROR,
    ErrorCategory,
    FetchFailedError,
    categorize_error_type,
    categorize_exception,
    error_category_to_reason,
)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("BOORUTAGS_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("BOORUTAGS_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("BOORUTAGS_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("BOORUTAGS_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("BOORUTAGS_HTTP_MAX_BODY_BYTES", "1024")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.max_body_bytes == 1024


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("BOORUTAGS_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("BOORUTAGS_HTTP_MAX_BODY_BYTES", "-5")

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.max_body_bytes == config.HttpSettings.max_body_bytes
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_quality_filter_defaults_and_env(monkeypatch):
    assert QualityFilter().to_query() == "score.gt:50, first_seen_at.lt:2 days ago"

    monkeypatch.setenv("BOORUTAGS_MIN_SCORE", "abc")
    monkeypatch.setenv("BOORUTAGS_MIN_AGE", "   ")
    assert config.load_quality_filter() == QualityFilter()

    monkeypatch.setenv("BOORUTAGS_MIN_SCORE", "200")
    monkeypatch.setenv("BOORUTAGS_MIN_AGE", "1 week ago")
    assert config.load_quality_filter() == QualityFilter(min_score=200, min_age="1 week ago")


def test_categorize_exception():
    request = httpx.Request("GET", "https://board.example")
    assert categorize_exception(httpx.ReadTimeout("t", request=request)) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("c", request=request)) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError()) == ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror()) == ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionResetError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("bad json")) == ErrorCategory.DECODE_ERROR
    assert categorize_exception(RuntimeError("?")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_error_type():
    assert categorize_error_type("ReadTimeout") == ErrorCategory.TIMEOUT
    assert categorize_error_type("ConnectError") == ErrorCategory.CONNECTION_ERROR
    assert categorize_error_type("SSLError") == ErrorCategory.SSL_ERROR
    assert categorize_error_type("gaierror") == ErrorCategory.DNS_ERROR
    assert categorize_error_type(None) == ErrorCategory.UNKNOWN_ERROR
    assert categorize_error_type("Weird") == ErrorCategory.UNKNOWN_ERROR


def test_fetch_failed_error_message():
    err = FetchFailedError("bad status", category=ErrorCategory.HTTP_STATUS, status_code=500)
    assert str(err) == "bad status (HTTP 500)"
    assert str(FetchFailedError("plain")) == "plain"
    assert FetchFailedError("plain").category == ErrorCategory.UNKNOWN_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.UNKNOWN_ERROR) == GENERIC_FETCH_ERROR
    assert error_category_to_reason(None) == ""
    assert "timeout" in error_category_to_reason(ErrorCategory.TIMEOUT).lower()

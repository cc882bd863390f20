# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx

GENERIC_FETCH_ERROR = "There was an error while fetching related tags"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    HTTP_STATUS = "HTTP_STATUS"
    DECODE_ERROR = "DECODE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class FetchFailedError(Exception):
    """Raised when a related-tag query cannot produce a result."""

    def __init__(
        self,
        reason: str,
        *,
        category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
        status_code: int | None = None,
    ):
        super().__init__(reason)
        self.reason = reason
        self.category = category
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.reason} (HTTP {self.status_code})"
        return self.reason


class UnknownSourceError(ValueError):
    """Raised when a data source name or URL is not in the configured list."""


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, httpx.HTTPStatusError):
        return ErrorCategory.HTTP_STATUS

    if isinstance(exc, (ValueError, TypeError, KeyError)):
        return ErrorCategory.DECODE_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def categorize_error_type(error_type: str | None) -> ErrorCategory:
    """Best-effort category for a transport failure reported only by exception class name."""
    if not error_type:
        return ErrorCategory.UNKNOWN_ERROR
    if "Timeout" in error_type:
        return ErrorCategory.TIMEOUT
    if "SSL" in error_type or "Certificate" in error_type:
        return ErrorCategory.SSL_ERROR
    if error_type in {"gaierror", "herror"}:
        return ErrorCategory.DNS_ERROR
    if "Connect" in error_type or "Network" in error_type or "Proxy" in error_type or "Protocol" in error_type:
        return ErrorCategory.CONNECTION_ERROR
    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout while querying the image index",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.HTTP_STATUS: "Image index returned an error status",
        ErrorCategory.DECODE_ERROR: "Unexpected response from the image index",
        ErrorCategory.UNKNOWN_ERROR: GENERIC_FETCH_ERROR,
        None: "",
    }
    return mapping.get(category, GENERIC_FETCH_ERROR)

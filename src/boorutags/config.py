# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for boorutags."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"boorutags/{__version__} (related tag finder)"

SEARCH_PATH = "/api/v1/json/search/images"
SORT_FIELD = "_score"
PAGE_SIZE = 50
RESULT_LIMIT = 20


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("BOORUTAGS_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("BOORUTAGS_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("BOORUTAGS_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("BOORUTAGS_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("BOORUTAGS_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass(frozen=True)
class QualityFilter:
    """
    Search clause that keeps the tag sample away from fresh or low-rated uploads.

    New uploads are usually not fully tagged yet, so counting their tags skews the
    suggestions. The same filter is applied to every data source.
    """

    min_score: int = 50
    min_age: str = "2 days ago"

    def to_query(self) -> str:
        return f"score.gt:{self.min_score}, first_seen_at.lt:{self.min_age}"


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_quality_filter() -> QualityFilter:
    """Load the global quality filter, honoring BOORUTAGS_MIN_SCORE / BOORUTAGS_MIN_AGE."""
    return QualityFilter(
        min_score=_int_env("BOORUTAGS_MIN_SCORE", QualityFilter.min_score),
        min_age=_str_env("BOORUTAGS_MIN_AGE", QualityFilter.min_age),
    )

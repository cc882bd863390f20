# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
boorutags package entrypoint.

Builds a working set of image-board tags and suggests related tags by sampling
well-rated images that carry any of them and counting the tags they co-occur with.
HTTP behavior is abstracted behind an injectable async client interface, and domain
objects are modeled with typed dataclasses.
"""

from .config import HttpSettings, QualityFilter, load_http_settings, load_quality_filter
from .errors import ErrorCategory, FetchFailedError, UnknownSourceError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import Candidate, DataSource, QueryResult
from .relevance import RelevanceEngine
from .session import TagSession
from .sources import DEFAULT_SOURCE, DEFAULT_SOURCES, get_source
from .tags import TagSetStore, split_tag_input
from .version import __version__

__all__ = [
    "Candidate",
    "DataSource",
    "DEFAULT_SOURCE",
    "DEFAULT_SOURCES",
    "ErrorCategory",
    "FetchFailedError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "QualityFilter",
    "QueryResult",
    "RelevanceEngine",
    "StubHttpClient",
    "TagSession",
    "TagSetStore",
    "UnknownSourceError",
    "create_default_http_client",
    "get_source",
    "load_http_settings",
    "load_quality_filter",
    "setup_logging",
    "split_tag_input",
    "__version__",
]

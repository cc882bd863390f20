# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Related-tag engine exports."""

from .engine import RelevanceEngine
from .query import build_query, build_search_params, build_search_url, escape_tag
from .ranking import aggregate_candidates, rank_candidates

__all__ = [
    "RelevanceEngine",
    "aggregate_candidates",
    "build_query",
    "build_search_params",
    "build_search_url",
    "escape_tag",
    "rank_candidates",
]

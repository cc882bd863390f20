# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Search query construction for Philomena-style image indexes."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urljoin

from ..config import PAGE_SIZE, SEARCH_PATH, SORT_FIELD, QualityFilter, load_quality_filter
from ..models.source import DataSource

OR_OPERATOR = " || "


def escape_tag(tag: str) -> str:
    """Quote a tag so the index matches it literally; backslashes are escaped before quotes."""
    return '"' + tag.replace("\\", "\\\\").replace('"', '\\"') + '"'


def build_query(tags: Sequence[str], quality_filter: QualityFilter | None = None) -> str:
    """
    Build the `q` search expression.

    With tags: `("a" || "b"), <quality filter>`; without: just the quality filter.
    """
    quality = (quality_filter or load_quality_filter()).to_query()
    if not tags:
        return quality
    disjunction = OR_OPERATOR.join(escape_tag(tag) for tag in tags)
    return f"({disjunction}), {quality}"


def build_search_url(source: DataSource) -> str:
    return urljoin(source.base_url, SEARCH_PATH)


def build_search_params(
    tags: Sequence[str],
    source: DataSource,
    quality_filter: QualityFilter | None = None,
) -> dict[str, str]:
    return {
        "q": build_query(tags, quality_filter),
        "filter_id": source.filter_id,
        "sf": SORT_FIELD,
        "per_page": str(PAGE_SIZE),
    }


__all__ = ["build_query", "build_search_params", "build_search_url", "escape_tag"]

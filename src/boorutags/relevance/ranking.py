# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Co-occurrence aggregation and ranking."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from ..config import RESULT_LIMIT
from ..models.candidate import Candidate, QueryResult


def aggregate_candidates(image_tags: Iterable[Iterable[str]], exclude: Iterable[str]) -> list[Candidate]:
    """Count every tag seen across the sampled images, skipping tags already chosen."""
    excluded = set(exclude)
    counts: Counter[str] = Counter(
        tag for tags in image_tags for tag in tags if tag not in excluded
    )
    return [Candidate(tag=tag, frequency=count) for tag, count in counts.items()]


def rank_candidates(candidates: Iterable[Candidate], limit: int = RESULT_LIMIT) -> QueryResult:
    """Order by frequency (desc) then tag text (asc) and keep the top `limit` tags, never more than RESULT_LIMIT."""
    limit = min(limit, RESULT_LIMIT)
    if limit <= 0:
        return []
    ranked = sorted(candidates, key=lambda candidate: candidate.sort_key)
    return [candidate.tag for candidate in ranked[:limit]]


__all__ = ["aggregate_candidates", "rank_candidates"]

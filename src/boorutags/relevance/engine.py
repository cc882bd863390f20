# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Related-tag lookup against an image index."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..config import RESULT_LIMIT, QualityFilter, load_quality_filter
from ..errors import ErrorCategory, FetchFailedError, categorize_error_type, categorize_exception, error_category_to_reason
from ..http import HttpRequest, HttpResponse, create_default_http_client
from ..http.client import HttpClient
from ..models.candidate import QueryResult
from ..models.source import DataSource
from .query import build_search_params, build_search_url
from .ranking import aggregate_candidates, rank_candidates

logger = logging.getLogger(__name__)

IMAGES_FIELD = "images"
TAGS_FIELD = "tags"


class RelevanceEngine:
    """Turns a tag set into ranked co-occurring tag suggestions."""

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        quality_filter: QualityFilter | None = None,
        limit: int = RESULT_LIMIT,
    ):
        self.http_client = http_client or create_default_http_client()
        self.quality_filter = quality_filter or load_quality_filter()
        self.limit = min(limit, RESULT_LIMIT)

    async def fetch_related(self, tags: Sequence[str], source: DataSource) -> QueryResult:
        """
        Query `source` once and return up to `limit` (at most RESULT_LIMIT) tags that co-occur with `tags`.

        Raises FetchFailedError on transport failure, non-2xx status or an
        unexpected response body. An empty list is a valid result.
        """
        chosen = list(tags)
        request = HttpRequest(
            url=build_search_url(source),
            method="GET",
            params=build_search_params(chosen, source, self.quality_filter),
        )
        response = await self._send(request)
        image_tags = self._decode_images(response)
        candidates = aggregate_candidates(image_tags, exclude=chosen)
        result = rank_candidates(candidates, limit=self.limit)
        logger.debug(
            "%s: %d images, %d candidates, returning %d tags",
            source.name,
            len(image_tags),
            len(candidates),
            len(result),
        )
        return result

    async def close(self) -> None:
        await self.http_client.close()

    async def _send(self, request: HttpRequest) -> HttpResponse:
        try:
            response = await self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("Search request to %s raised: %s", request.url, exc)
            raise FetchFailedError(error_category_to_reason(category), category=category) from exc

        if not response.ok:
            category = categorize_error_type(response.error_type)
            logger.debug(
                "Search request to %s failed: %s (%s)",
                request.url,
                response.error_message,
                response.error_type,
            )
            raise FetchFailedError(error_category_to_reason(category), category=category)

        if not response.is_success:
            logger.debug("Search request to %s returned HTTP %s", request.url, response.status_code)
            raise FetchFailedError(
                error_category_to_reason(ErrorCategory.HTTP_STATUS),
                category=ErrorCategory.HTTP_STATUS,
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode_images(response: HttpResponse) -> list[list[str]]:
        reason = error_category_to_reason(ErrorCategory.DECODE_ERROR)
        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise FetchFailedError(reason, category=ErrorCategory.DECODE_ERROR) from exc

        images = payload.get(IMAGES_FIELD) if isinstance(payload, dict) else None
        if not isinstance(images, list):
            raise FetchFailedError(reason, category=ErrorCategory.DECODE_ERROR)

        image_tags: list[list[str]] = []
        for image in images:
            tags = image.get(TAGS_FIELD) if isinstance(image, dict) else None
            if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
                raise FetchFailedError(reason, category=ErrorCategory.DECODE_ERROR)
            image_tags.append(tags)
        return image_tags

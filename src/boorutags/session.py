# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authoring session: the working tag set plus the state of the last related-tag query."""

from __future__ import annotations

import logging

from .errors import FetchFailedError
from .http.client import HttpClient
from .models.candidate import QueryResult
from .models.source import DataSource
from .relevance.engine import RelevanceEngine
from .sources import DEFAULT_SOURCE, DEFAULT_SOURCES, get_source
from .tags.store import TagSetStore

logger = logging.getLogger(__name__)


class TagSession:
    """
    Wires a TagSetStore to a RelevanceEngine.

    `last_result` and `last_error` are mutually exclusive: a failed query clears
    the previous suggestions instead of leaving them stale.
    """

    def __init__(
        self,
        engine: RelevanceEngine | None = None,
        *,
        http_client: HttpClient | None = None,
        source: DataSource = DEFAULT_SOURCE,
        sources: tuple[DataSource, ...] = DEFAULT_SOURCES,
    ):
        self.engine = engine or RelevanceEngine(http_client)
        self.sources = sources
        self.source = source
        self.tags = TagSetStore()
        self.last_result: QueryResult | None = None
        self.last_error: FetchFailedError | None = None
        self._pending = 0

    @property
    def query_in_flight(self) -> bool:
        return self._pending > 0

    def add_from_input(self, raw_text: str | None) -> list[str]:
        return self.tags.add_from_input(raw_text)

    def remove(self, tag: str) -> list[str]:
        return self.tags.remove(tag)

    def remove_last(self) -> list[str]:
        return self.tags.remove_last()

    def toggle(self, tag: str) -> list[str]:
        return self.tags.toggle(tag)

    def is_selected(self, tag: str) -> bool:
        return tag in self.tags

    def clear(self) -> list[str]:
        self.last_result = None
        self.last_error = None
        return self.tags.clear()

    def select_source(self, key: str) -> DataSource:
        self.source = get_source(key, self.sources)
        return self.source

    def export_text(self) -> str:
        return self.tags.export_text()

    async def load_related(self) -> QueryResult | None:
        """Run one related-tag query; returns None (and sets `last_error`) on failure."""
        snapshot = self.tags.snapshot()
        self._pending += 1
        try:
            result = await self.engine.fetch_related(snapshot, self.source)
        except FetchFailedError as exc:
            logger.info("Related tag lookup on %s failed: %s", self.source.name, exc)
            self.last_error = exc
            self.last_result = None
            return None
        finally:
            self._pending -= 1
        self.last_result = result
        self.last_error = None
        return result

    async def close(self) -> None:
        await self.engine.close()

    async def __aenter__(self) -> "TagSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.close()

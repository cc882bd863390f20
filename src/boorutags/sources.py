# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Statically configured image indexes."""

from __future__ import annotations

from .errors import UnknownSourceError
from .models.source import DataSource

DERPIBOORU = DataSource(name="Derpibooru", base_url="https://derpibooru.org", filter_id="56027")
FURBOORU = DataSource(name="Furbooru", base_url="https://furbooru.org", filter_id="2")

DEFAULT_SOURCES: tuple[DataSource, ...] = (DERPIBOORU, FURBOORU)
DEFAULT_SOURCE = DEFAULT_SOURCES[0]


def _normalize_url(url: str) -> str:
    return url.strip().rstrip("/").lower()


def get_source(key: str, sources: tuple[DataSource, ...] = DEFAULT_SOURCES) -> DataSource:
    """Look up a source by case-insensitive name or by base URL."""
    wanted = (key or "").strip()
    for source in sources:
        if source.name.lower() == wanted.lower():
            return source
        if _normalize_url(source.base_url) == _normalize_url(wanted):
            return source
    known = ", ".join(source.name for source in sources)
    raise UnknownSourceError(f"Unknown data source {key!r}; expected one of: {known}")


__all__ = ["DEFAULT_SOURCE", "DEFAULT_SOURCES", "DERPIBOORU", "FURBOORU", "get_source"]

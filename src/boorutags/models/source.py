# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Data source descriptor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataSource:
    """
    One image index the related-tag query can run against.

    - `base_url` is the board origin; the search endpoint path is appended to it.
    - `filter_id` is the board-side content filter applied to every search.
    """

    name: str
    base_url: str
    filter_id: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "base_url": self.base_url, "filter_id": self.filter_id}

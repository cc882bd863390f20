# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Related-tag candidate models."""

from __future__ import annotations

from dataclasses import dataclass

QueryResult = list[str]


@dataclass(frozen=True)
class Candidate:
    tag: str
    frequency: int

    @property
    def sort_key(self) -> tuple[int, str]:
        """Frequency descending, then tag text ascending."""
        return (-self.frequency, self.tag)

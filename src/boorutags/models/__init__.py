# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for boorutags."""

from .candidate import Candidate, QueryResult
from .source import DataSource

__all__ = [
    "Candidate",
    "DataSource",
    "QueryResult",
]

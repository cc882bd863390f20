# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tag set exports."""

from .store import TagSetStore, split_tag_input

__all__ = ["TagSetStore", "split_tag_input"]

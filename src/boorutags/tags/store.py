# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Working tag set for a single authoring session."""

from collections.abc import Iterator

TAG_SEPARATOR = ","
EXPORT_SEPARATOR = ", "


def split_tag_input(raw_text: str | None) -> list[str]:
    """
    Parse comma-separated tag input.

    Pieces are stripped and blank pieces dropped; repeated tags keep their first
    position. Malformed input never raises.
    """
    tokens: list[str] = []
    seen: set[str] = set()
    for piece in (raw_text or "").split(TAG_SEPARATOR):
        tag = piece.strip()
        if tag and tag not in seen:
            seen.add(tag)
            tokens.append(tag)
    return tokens


class TagSetStore:
    """Ordered, deduplicated tag collection; mutators return the new snapshot."""

    def __init__(self, tags: list[str] | None = None):
        self._tags: list[str] = []
        self._seen: set[str] = set()
        for tag in tags or []:
            self.add(tag)

    def add(self, tag: str) -> bool:
        if not tag.strip() or TAG_SEPARATOR in tag or tag in self._seen:
            return False
        self._seen.add(tag)
        self._tags.append(tag)
        return True

    def add_from_input(self, raw_text: str | None) -> list[str]:
        for tag in split_tag_input(raw_text):
            self.add(tag)
        return self.snapshot()

    def remove(self, tag: str) -> list[str]:
        if tag in self._seen:
            self._seen.remove(tag)
            self._tags.remove(tag)
        return self.snapshot()

    def remove_last(self) -> list[str]:
        if self._tags:
            self._seen.remove(self._tags.pop())
        return self.snapshot()

    def toggle(self, tag: str) -> list[str]:
        if tag in self._seen:
            return self.remove(tag)
        self.add(tag)
        return self.snapshot()

    def clear(self) -> list[str]:
        self._tags.clear()
        self._seen.clear()
        return self.snapshot()

    def snapshot(self) -> list[str]:
        return list(self._tags)

    def export_text(self) -> str:
        """Clipboard form of the set."""
        return EXPORT_SEPARATOR.join(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"TagSetStore({self._tags!r})"

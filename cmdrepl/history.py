"""Navigable command history with a movable cursor."""

from __future__ import annotations

from typing import Iterator, Optional

__all__ = ["History"]


class History:
    """An ordered list of records with a cursor for stepping back and forth."""

    def __init__(self) -> None:
        self._records: list[str] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def add_back(self, record: str) -> None:
        """Append a record and move the cursor past the end."""
        self._records.append(record)
        self._cursor = len(self._records)

    def add_front(self, record: str) -> None:
        """Prepend a record and move the cursor onto it."""
        self._records.insert(0, record)
        self._cursor = 0

    def previous(self) -> Optional[str]:
        """Step the cursor back and return that record, or None at the start."""
        if not self._records or self._cursor == 0:
            return None
        self._cursor -= 1
        return self._records[self._cursor]

    def next(self) -> Optional[str]:
        """Step the cursor forward and return that record, or None at the end."""
        if not self._records or self._cursor >= len(self._records) - 1:
            return None
        self._cursor += 1
        return self._records[self._cursor]

    def edit(self, text: str) -> None:
        """Replace the record under the cursor, if the cursor is on one."""
        if 0 <= self._cursor < len(self._records):
            self._records[self._cursor] = text

    def as_text(self) -> str:
        """Return every record followed by a newline, oldest first."""
        return "".join(f"{record}\n" for record in self._records)
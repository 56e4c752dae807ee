"""
Match records and the append-only store that owns them.

The store grows in fixed chunks of MATCH_CHUNK_LEN slots. Once parsing is
done, finalize() computes each record's display label and hands out one
MatchHandle per record; the list view keys its rows by these handles and
resolves them back to the Match when a row is activated.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator

from grepbrowse.config import MATCH_CHUNK_LEN
from grepbrowse.errors import InternalError


@dataclass
class Match:
    """A single parsed match line.

    Attributes:
        filepath: Sanitized, bounded path of the matching file.
        line: One-based line number of the match.
        description: Sanitized, bounded matching text.
        label: Display label "<basename> [<line>]", set by finalize().
    """

    filepath: str = ""
    line: int = 0
    description: str = ""
    label: str | None = None

    def make_label(self) -> str:
        """Build the display label for this match.

        Examples:
            >>> Match("/a/b.c", 10, "hello").make_label()
            'b.c [10]'
        """
        name = os.path.basename(self.filepath.rstrip("/")) or self.filepath
        return f"{name} [{self.line}]"


@dataclass(frozen=True)
class MatchHandle:
    """Lightweight back-reference from a display row to its Match."""

    index: int

    @property
    def key(self) -> str:
        """Row key used by the list renderer."""
        return str(self.index)

    @classmethod
    def from_key(cls, key: str | None) -> "MatchHandle":
        """Parse a row key back into a handle.

        Raises:
            InternalError: If key is missing or not a row key.
        """
        try:
            return cls(int(key))  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InternalError("no entry associated with match") from None


class MatchStore:
    """Append-only, chunk-grown collection of Match slots."""

    def __init__(self, chunk_len: int = MATCH_CHUNK_LEN) -> None:
        if chunk_len < 1:
            raise ValueError(f"chunk_len must be at least 1, got {chunk_len}")
        self._chunk_len = chunk_len
        self._slots: list[Match] = []
        self._count = 0
        self._handles: list[MatchHandle] | None = None

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def finalized(self) -> bool:
        return self._handles is not None

    def _grow(self) -> None:
        if self._count == len(self._slots):
            self._slots.extend(Match() for _ in range(self._chunk_len))

    def append(self) -> Match:
        """Return a cleared slot for the next record.

        The slot is only counted after commit(); an uncommitted slot is
        handed out again by the next append().
        """
        if self._handles is not None:
            raise RuntimeError("cannot append to a finalized store")
        self._grow()
        slot = self._slots[self._count]
        slot.filepath = ""
        slot.line = 0
        slot.description = ""
        slot.label = None
        return slot

    def commit(self) -> None:
        """Count the slot returned by the last append()."""
        if self._count >= len(self._slots):
            raise RuntimeError("commit() without append()")
        self._count += 1

    def finalize(self) -> list[MatchHandle]:
        """Compute labels and return one handle per stored match.

        Raises:
            ValueError: If the store is empty.
        """
        if self._count == 0:
            raise ValueError("cannot finalize an empty match store")
        if self._handles is None:
            for match in self:
                match.label = match.make_label()
            self._handles = [MatchHandle(i) for i in range(self._count)]
        return list(self._handles)

    def resolve(self, handle: MatchHandle | None) -> Match:
        """Return the Match a handle refers to.

        Raises:
            InternalError: If the handle does not refer to a stored match.
        """
        if handle is None or not 0 <= handle.index < self._count:
            raise InternalError("no entry associated with match")
        return self._slots[handle.index]

    def close(self) -> None:
        """Release every record, label and slot."""
        self._slots.clear()
        self._count = 0
        self._handles = None

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> Match:
        if not 0 <= index < self._count:
            raise IndexError(f"Match index {index} out of range")
        return self._slots[index]

    def __iter__(self) -> Iterator[Match]:
        for i in range(self._count):
            yield self._slots[i]

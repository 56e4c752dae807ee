"""
Bounded string buffer used by the match parser.

A BoundedString has a fixed capacity that includes one slot reserved for
the terminator, so it holds at most ``capacity - 1`` characters. Input past
that point is dropped, never stored.
"""

from __future__ import annotations


class BoundedString:
    """Append-only string buffer that silently truncates at its bound.

    Attributes:
        capacity: Total size including the terminator slot.
    """

    __slots__ = ("capacity", "_chars")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._chars: list[str] = []

    @property
    def limit(self) -> int:
        """Return the maximum number of characters the buffer holds."""
        return self.capacity - 1

    @property
    def full(self) -> bool:
        return len(self._chars) >= self.limit

    def append(self, ch: str, count: int = 1) -> int:
        """Append ch up to count times, stopping at the bound.

        Args:
            ch: A single character.
            count: Number of copies to append.

        Returns:
            The number of characters actually stored.
        """
        room = self.limit - len(self._chars)
        stored = max(0, min(count, room))
        if stored:
            self._chars.extend(ch * stored)
        return stored

    def reset(self) -> None:
        self._chars.clear()

    @property
    def value(self) -> str:
        return "".join(self._chars)

    def terminated(self) -> str:
        """Return the contents followed by the NUL terminator."""
        return self.value + "\0"

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"BoundedString(capacity={self.capacity}, value={self.value!r})"

"""
Abstract base class for match stream parsers.

This module defines the MatchParser interface that line format parsers
implement, and the ParseResult values they return.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import IO, Callable

from grepbrowse.store import Match, MatchStore


class ParseResult(Enum):
    """Outcome of parsing one line of the stream."""

    END = "end"
    SUCCESS = "success"
    MALFORMED = "malformed"


class MatchParser(ABC):
    """Abstract base class for parsing producer output into matches.

    Parsers read a text stream one line at a time, filling a Match slot
    provided by the caller.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'grep')."""
        pass

    @abstractmethod
    def parse_next(self, stream: IO[str], match: Match) -> ParseResult:
        """Parse the next line of the stream into match.

        Args:
            stream: Text stream positioned at the start of a line.
            match: Slot to populate. Only meaningful on SUCCESS.

        Returns:
            END at end of stream, SUCCESS if match was populated, or
            MALFORMED if the line was discarded.
        """
        pass

    @abstractmethod
    def load_all(
        self,
        stream: IO[bytes],
        store: MatchStore,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> int:
        """Drain a byte stream into the store.

        Args:
            stream: Binary stream, typically the producer's stdout pipe.
            store: Store receiving every successfully parsed match.
            progress_callback: Optional callback(parsed_count, malformed_count).

        Returns:
            The number of matches in the store.
        """
        pass

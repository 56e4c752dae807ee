"""
Parser for line-numbered search tool output.

This module provides the GrepLineParser class for the format produced by
``grep -n`` and compatible tools::

    <filepath>:<linenumber>:<description>\\n

Only the first two separators are structural; any later separator belongs
to the description. Every field is written into a BoundedString, so an
oversized field is truncated rather than stored whole, and non-printable
characters are replaced before they reach the display.
"""

from __future__ import annotations

import io
import logging
from enum import Enum
from typing import IO, Callable

from grepbrowse.config import (
    LINE_NUMBER_LEN,
    MATCH_DESCRIPTION_LEN,
    MATCH_PATH_LEN,
    NONPRINT_REPLACEMENT,
    SEPARATOR,
    TAB_REPLACEMENT,
    TAB_STOP,
)
from grepbrowse.match_formats.base import MatchParser, ParseResult
from grepbrowse.match_formats.bounded import BoundedString
from grepbrowse.store import Match, MatchStore

logger = logging.getLogger(__name__)

# Characters requested per readline() call; bounds memory use on huge lines
READ_CHUNK = 4096
PROGRESS_INTERVAL = 1000


class ParseState(Enum):
    """Field currently receiving characters."""

    FILEPATH = 0
    LINE = 1
    DESCRIPTION = 2


def sanitize(ch: str) -> tuple[str, int]:
    """Map one input character to (replacement, repeat count).

    Examples:
        >>> sanitize("a")
        ('a', 1)
        >>> sanitize("\\t")
        (' ', 4)
        >>> sanitize("\\x07")
        ('.', 1)
    """
    if ch.isprintable():
        return ch, 1
    if ch == "\t":
        return TAB_REPLACEMENT, TAB_STOP
    return NONPRINT_REPLACEMENT, 1


def parse_line_number(text: str) -> int | None:
    """Parse the line field, returning None unless it is a positive integer.

    Examples:
        >>> parse_line_number("42")
        42
        >>> parse_line_number("4x") is None
        True
    """
    if not text or not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    return number if number > 0 else None


class GrepLineParser(MatchParser):
    """Bounded incremental parser for ``file:line:text`` match lines.

    Attributes:
        separator: Structural separator character.
        path_len: Capacity of the filepath buffer (including terminator).
        description_len: Capacity of the description buffer.
    """

    def __init__(
        self,
        separator: str = SEPARATOR,
        path_len: int = MATCH_PATH_LEN,
        description_len: int = MATCH_DESCRIPTION_LEN,
    ) -> None:
        if len(separator) != 1:
            raise ValueError(f"separator must be a single character, got {separator!r}")
        self.separator = separator
        self._filepath = BoundedString(path_len)
        self._line_number = BoundedString(LINE_NUMBER_LEN)
        self._description = BoundedString(description_len)
        self.state = ParseState.FILEPATH

    @property
    def format_name(self) -> str:
        return "grep"

    def _buffer(self) -> BoundedString:
        if self.state is ParseState.FILEPATH:
            return self._filepath
        if self.state is ParseState.LINE:
            return self._line_number
        return self._description

    def _reset(self) -> None:
        self.state = ParseState.FILEPATH
        self._filepath.reset()
        self._line_number.reset()
        self._description.reset()

    def _feed(self, ch: str) -> None:
        if ch == self.separator and self.state is not ParseState.DESCRIPTION:
            self.state = ParseState(self.state.value + 1)
            self._buffer().reset()
            return
        replacement, count = sanitize(ch)
        self._buffer().append(replacement, count)

    def _finish(self, match: Match) -> ParseResult:
        if self.state is not ParseState.DESCRIPTION:
            logger.debug("malformed match line: %r", self._filepath.value)
            return ParseResult.MALFORMED
        line = parse_line_number(self._line_number.value)
        if line is None:
            logger.debug("malformed line number: %r", self._line_number.value)
            return ParseResult.MALFORMED
        match.filepath = self._filepath.value
        match.line = line
        match.description = self._description.value
        match.label = None
        return ParseResult.SUCCESS

    def parse_next(self, stream: IO[str], match: Match) -> ParseResult:
        """Parse the next line of a text stream into match.

        Returns END only if the stream is exhausted before any character of
        a new line is read. A final line without a trailing newline is
        parsed like any other.
        """
        self._reset()
        seen_any = False
        while True:
            chunk = stream.readline(READ_CHUNK)
            if not chunk:
                if not seen_any:
                    return ParseResult.END
                return self._finish(match)
            seen_any = True
            for ch in chunk:
                if ch == "\n":
                    return self._finish(match)
                self._feed(ch)

    def load_all(
        self,
        stream: IO[bytes],
        store: MatchStore,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> int:
        """Drain a byte stream into the store.

        The bytes are decoded as UTF-8; undecodable bytes become U+FFFD.

        Examples:
            >>> store = MatchStore()
            >>> GrepLineParser().load_all(io.BytesIO(b"/a/b.c:10:hi\\n"), store)
            1
        """
        text = io.TextIOWrapper(stream, encoding="utf-8", errors="replace", newline="\n")
        malformed = 0
        lines = 0
        try:
            while True:
                result = self.parse_next(text, store.append())
                if result is ParseResult.END:
                    break
                lines += 1
                if result is ParseResult.SUCCESS:
                    store.commit()
                else:
                    malformed += 1
                if progress_callback is not None and lines % PROGRESS_INTERVAL == 0:
                    progress_callback(len(store), malformed)
        finally:
            # Leave the underlying stream open for its owner to close
            text.detach()

        if progress_callback is not None:
            progress_callback(len(store), malformed)
        logger.info(
            "parsed %d matches (%d malformed lines)", len(store), malformed
        )
        return len(store)

"""
Match formats module for parsing producer output.

Usage:
    from grepbrowse.match_formats import GrepLineParser
    from grepbrowse.store import MatchStore

    store = MatchStore()
    GrepLineParser().load_all(producer.stdout, store)
"""

from grepbrowse.match_formats.base import MatchParser, ParseResult
from grepbrowse.match_formats.bounded import BoundedString
from grepbrowse.match_formats.grep_parser import (
    GrepLineParser,
    ParseState,
    parse_line_number,
    sanitize,
)

__all__ = [
    # Base class
    "MatchParser",
    "ParseResult",
    # Buffers
    "BoundedString",
    # Parsers
    "GrepLineParser",
    "ParseState",
    "parse_line_number",
    "sanitize",
]

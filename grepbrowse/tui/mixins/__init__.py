"""Mixins for the TUI application."""

from grepbrowse.tui.mixins.data_table import MatchTableMixin
from grepbrowse.tui.mixins.navigation import SessionNavigationMixin

__all__ = [
    "MatchTableMixin",
    "SessionNavigationMixin",
]

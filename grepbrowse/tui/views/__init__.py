"""TUI views for grepbrowse."""

from grepbrowse.tui.views.match_list import MatchListScreen

__all__ = ["MatchListScreen"]

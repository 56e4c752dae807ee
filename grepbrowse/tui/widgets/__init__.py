"""TUI widgets for grepbrowse."""

from grepbrowse.tui.widgets.match_table import MatchTable
from grepbrowse.tui.widgets.status_footer import StatusFooter, format_footer

__all__ = [
    # Match list
    "MatchTable",
    # Footer
    "StatusFooter",
    "format_footer",
]

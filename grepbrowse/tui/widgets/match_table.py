"""
DataTable used for the match list.

The table never takes focus and ignores mouse clicks, so its selection only
changes when the screen moves the cursor on the controller's behalf.
"""

from __future__ import annotations

from textual import events
from textual.widgets import DataTable


class MatchTable(DataTable, can_focus=False):
    """Row-cursor table of matches without its own input handling."""

    DEFAULT_CSS = """
    MatchTable {
        height: 1fr;
        background: $surface;
    }

    MatchTable > .datatable--cursor {
        background: $primary;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(
            show_header=False,
            cursor_type="row",
            zebra_stripes=False,
            **kwargs,
        )

    async def _on_click(self, event: events.Click) -> None:
        event.prevent_default()

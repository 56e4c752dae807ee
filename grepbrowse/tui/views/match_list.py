"""
Match List Screen for grepbrowse.

Displays every parsed match as "<basename> [<line>]" plus the matching text,
with a footer showing the match count. Enter opens the selected match in the
editor; q or Escape quits.
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.events import Resize
from textual.screen import Screen

from grepbrowse.errors import InternalError
from grepbrowse.tui.dispatcher import ActionDispatcher
from grepbrowse.tui.mixins import MatchTableMixin, SessionNavigationMixin
from grepbrowse.tui.session import BrowseSession
from grepbrowse.tui.widgets import MatchTable, StatusFooter

logger = logging.getLogger(__name__)


class MatchListScreen(MatchTableMixin, SessionNavigationMixin, Screen):
    """Screen that lists the matches of one session."""

    CSS = """
    MatchListScreen {
        layout: vertical;
    }
    """

    BINDINGS = SessionNavigationMixin.NAV_BINDINGS

    def __init__(
        self,
        session: BrowseSession,
        dispatcher: ActionDispatcher,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the MatchListScreen.

        Args:
            session: The session whose matches are listed.
            dispatcher: Opens activated matches in the editor.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.session = session
        self.dispatcher = dispatcher
        self._marked_row: int | None = None

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield MatchTable(id="match-table")
        yield StatusFooter(self.session.match_count, id="status-footer")

    def on_mount(self) -> None:
        """Populate the table when the screen is mounted."""
        table = self.query_one("#match-table", MatchTable)
        self._populate_match_table(table, self.session)
        self._sync_cursor()
        self.call_after_refresh(self._update_page_size)

    def on_resize(self, event: Resize) -> None:
        """Recompute the page size once the new layout is in place."""
        self.call_after_refresh(self._update_page_size)

    def _update_page_size(self) -> None:
        table = self.query_one("#match-table", MatchTable)
        self.session.controller.page_size = table.size.height

    def _sync_cursor(self) -> None:
        table = self.query_one("#match-table", MatchTable)
        selection = self.session.controller.selection
        table.move_cursor(row=selection, animate=False)
        self._set_cursor_mark(table, self._marked_row, selection)
        self._marked_row = selection

    def _activate_selection(self) -> None:
        table = self.query_one("#match-table", MatchTable)
        try:
            handle = self._get_row_handle(table, self.session.controller.selection)
            match = self.session.resolve(handle)
        except InternalError as e:
            logger.error("activation failed: %s", e)
            self.app.fail_session(e)
            return
        self.dispatcher.open(match)
        self._sync_cursor()

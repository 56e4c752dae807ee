"""
DataTable Mixin for match table setup and row/handle lookup.

Provides reusable methods for:
- _configure_table(): Apply column configuration to a DataTable
- _populate_match_table(): Add one row per match, keyed by its handle
- _get_row_handle(): Resolve a table row back to its MatchHandle
- _set_cursor_mark(): Move the ">" mark to a row

Usage:
    class MyScreen(MatchTableMixin, Screen):
        def on_mount(self):
            table = self.query_one(MatchTable)
            self._populate_match_table(table, self.session)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.coordinate import Coordinate
from textual.widgets import DataTable
from textual.widgets.data_table import CellDoesNotExist

from grepbrowse.config import MENU_MARK
from grepbrowse.errors import InternalError
from grepbrowse.store import MatchHandle

if TYPE_CHECKING:
    from grepbrowse.tui.session import BrowseSession

MARK_COLUMN = "mark"
LABEL_COLUMN = "label"
DESCRIPTION_COLUMN = "description"


class MatchTableMixin:
    """Mixin providing match table population and row-to-handle lookup."""

    def _configure_table(
        self,
        table: DataTable,
        columns: list[tuple[str, str, int | None]],
    ) -> None:
        """Add columns to a DataTable.

        Args:
            table: The DataTable instance to configure.
            columns: List of (key, label, width) tuples. Width can be None.
        """
        for key, label, width in columns:
            table.add_column(label, key=key, width=width)

    def _populate_match_table(self, table: DataTable, session: BrowseSession) -> None:
        """Add one row per match, keyed by the match handle.

        Args:
            table: The table to fill.
            session: Session whose store has been finalized.
        """
        label_width = max(len(session.resolve(h).label or "") for h in session.handles)
        self._configure_table(
            table,
            [
                (MARK_COLUMN, "", len(MENU_MARK)),
                (LABEL_COLUMN, "Match", label_width),
                (DESCRIPTION_COLUMN, "Text", None),
            ],
        )
        for handle in session.handles:
            match = session.resolve(handle)
            table.add_row("", match.label, match.description, key=handle.key)

    def _get_row_handle(self, table: DataTable, row: int) -> MatchHandle:
        """Return the handle of the row at a given index.

        Raises:
            InternalError: If the row has no handle.
        """
        try:
            row_key = table.coordinate_to_cell_key(Coordinate(row, 0)).row_key
        except CellDoesNotExist:
            raise InternalError("no entry associated with match") from None
        return MatchHandle.from_key(row_key.value)

    def _set_cursor_mark(self, table: DataTable, old_row: int | None, new_row: int) -> None:
        """Move the cursor mark from old_row to new_row."""
        if old_row is not None and old_row != new_row:
            table.update_cell_at(Coordinate(old_row, 0), "")
        table.update_cell_at(Coordinate(new_row, 0), MENU_MARK)

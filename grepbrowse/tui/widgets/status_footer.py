"""
Status footer showing the match count and the exit hint.
"""

from __future__ import annotations

from textual.events import Resize
from textual.widgets import Static

from grepbrowse.config import EXIT_HINT


def format_footer(match_count: int, width: int, hint: str = EXIT_HINT) -> str | None:
    """Lay out the footer text for a given terminal width.

    The count is left-aligned and the hint right-aligned, padded to exactly
    width characters.

    Args:
        match_count: Number of matches in the session.
        width: Available columns.
        hint: Right-hand hint text.

    Returns:
        The footer text, or None if width cannot hold both parts.

    Examples:
        >>> format_footer(3, 30)
        "3 matches    Hit 'q' to exit  "
        >>> format_footer(3, 10) is None
        True
    """
    count_text = f"{match_count} matches"
    gap = width - len(count_text) - len(hint)
    if gap < 0:
        return None
    return count_text + " " * gap + hint


class StatusFooter(Static):
    """One-line footer; blank when the terminal is too narrow for it."""

    DEFAULT_CSS = """
    StatusFooter {
        dock: bottom;
        height: 1;
        background: $success;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self, match_count: int, **kwargs) -> None:
        super().__init__("", markup=False, **kwargs)
        self.match_count = match_count

    def on_resize(self, event: Resize) -> None:
        self.refresh_text(event.size.width)

    def refresh_text(self, width: int) -> None:
        self.update(format_footer(self.match_count, width) or "")

"""
Session Navigation Mixin for controller-driven keybindings.

Routes j/k/arrows/page keys, Enter and q/Escape through the screen's
SessionController so the controller alone decides the selection. The
bindings are priority bindings: they win over the table's own cursor keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding

from grepbrowse.tui.session import Command, SessionController

if TYPE_CHECKING:
    from grepbrowse.tui.session import BrowseSession


def _navigation_bindings() -> list[Binding]:
    bindings = []
    keys = (
        list(SessionController.KEYMAP)
        + sorted(SessionController.ACTIVATE_KEYS)
        + sorted(SessionController.QUIT_KEYS)
    )
    for key in keys:
        bindings.append(
            Binding(key, f"navigate('{key}')", key.title(), show=False, priority=True)
        )
    return bindings


class SessionNavigationMixin:
    """Mixin mapping key presses to SessionController commands.

    Usage:
        class MyScreen(SessionNavigationMixin, Screen):
            BINDINGS = SessionNavigationMixin.NAV_BINDINGS + [...]

            def _sync_cursor(self) -> None: ...
            def _activate_selection(self) -> None: ...
    """

    NAV_BINDINGS = _navigation_bindings()

    session: BrowseSession

    def action_navigate(self, key: str) -> None:
        """Apply a key press to the controller and act on the result."""
        command = self.session.controller.handle_key(key)
        if command is Command.MOVED:
            self._sync_cursor()
        elif command is Command.ACTIVATE:
            self._activate_selection()
        elif command is Command.QUIT:
            self.app.exit(return_code=0)

    def _sync_cursor(self) -> None:
        """Move the rendered cursor to the controller's selection."""
        raise NotImplementedError

    def _activate_selection(self) -> None:
        """Open the selected match."""
        raise NotImplementedError

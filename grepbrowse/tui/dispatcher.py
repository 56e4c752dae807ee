"""
Action dispatcher: open a match in the external editor.

The editor gets the terminal to itself: the Textual display is suspended
for the duration of the (blocking) editor process and resumed afterwards.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.app import SuspendNotSupported

from grepbrowse.store import Match

if TYPE_CHECKING:
    from textual.app import App

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorCommand:
    """Editor program and leading arguments, e.g. ["code", "-w"]."""

    parts: tuple[str, ...]

    @classmethod
    def from_parts(cls, parts: list[str]) -> "EditorCommand":
        return cls(tuple(parts))

    def argv(self, match: Match) -> list[str]:
        """Build the argument vector opening match at its line.

        Examples:
            >>> EditorCommand(("vi",)).argv(Match("/a/b.c", 10, "x"))
            ['vi', '+10', '/a/b.c']
        """
        return [*self.parts, f"+{match.line}", match.filepath]


class ActionDispatcher:
    """Runs the editor for an activated match around a suspended display."""

    def __init__(self, app: App, editor: EditorCommand) -> None:
        self._app = app
        self.editor = editor

    def open(self, match: Match) -> int | None:
        """Open match in the editor and wait for it to exit.

        Args:
            match: The activated match.

        Returns:
            The editor's exit status, or None if it could not be started.
        """
        argv = self.editor.argv(match)
        logger.info("opening editor: %s", argv)
        try:
            with self._app.suspend():
                completed = subprocess.run(argv, check=False)
        except SuspendNotSupported:
            logger.error("terminal cannot be suspended, not opening %s", match.filepath)
            self._app.notify("This terminal cannot run an editor", severity="error")
            return None
        except OSError as e:
            logger.error("cannot start editor %s: %s", argv[0], e)
            self._app.notify(f"Cannot start editor {argv[0]}: {e}", severity="error")
            return None

        if completed.returncode != 0:
            logger.warning("editor %s exited with status %d", argv[0], completed.returncode)
        return completed.returncode

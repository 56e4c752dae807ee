"""
Main Textual application for grepbrowse.

This is the entry point: it runs the producer program, parses its output
into matches, and then shows them in a list until the user quits.

Exit codes:
    - 0: Quit from the browser, or producer succeeded with unparsable output
    - 1: Producer found no matches, or a fatal error occurred
    - 2: No producer program given
    - other: Producer's own exit status when it failed without output
"""

from __future__ import annotations

import argparse
import logging
import sys

from textual.app import App

from grepbrowse import __version__, logging_setup
from grepbrowse.config import BrowseConfig
from grepbrowse.errors import BrowseError, LauncherError
from grepbrowse.launcher import spawn_producer
from grepbrowse.tui.dispatcher import ActionDispatcher, EditorCommand
from grepbrowse.tui.session import BrowseSession, load_session
from grepbrowse.tui.views import MatchListScreen

logger = logging.getLogger(__name__)


class MatchBrowserApp(App):
    """A Textual app for browsing matches and opening them in an editor."""

    TITLE = "grepbrowse"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, session: BrowseSession, dispatcher: ActionDispatcher | None = None):
        """Initialize the app with a populated session.

        Args:
            session: The session to browse.
            dispatcher: Editor dispatcher. Built from the session's editor
                configuration if not given.
        """
        super().__init__()
        self.session = session
        self.dispatcher = dispatcher or ActionDispatcher(
            self, EditorCommand.from_parts(session.config.editor)
        )
        self.fatal_error: BrowseError | None = None

    def on_mount(self) -> None:
        """Show the match list."""
        self.push_screen(MatchListScreen(self.session, self.dispatcher))

    def fail_session(self, error: BrowseError) -> None:
        """Leave the event loop because of a fatal error."""
        self.fatal_error = error
        self.exit(return_code=1)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="grepbrowse",
        description="Browse the output of a line-numbered search (grep -n, "
        "git grep -n, rg -n) and open matches in an editor.",
    )
    parser.add_argument(
        "--editor",
        default=None,
        help="Editor command used to open matches (default: $EDITOR or vi)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("program", help="Search program to run, e.g. grep")
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the search program",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """Run grepbrowse and return the process exit status."""
    args = build_parser().parse_args(argv)
    config = BrowseConfig.from_env(editor_override=args.editor)
    logging_setup.configure(config)

    try:
        producer = spawn_producer([args.program, *args.args])
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = load_session(producer, config)
    if result.session is None:
        outcome = result.outcome
        assert outcome is not None
        if outcome.message:
            print(outcome.message, file=sys.stderr)
        return outcome.exit_code

    session = result.session
    logger.info("browsing %d matches", session.match_count)
    try:
        app = MatchBrowserApp(session)
        app.run()
    finally:
        session.close()

    if app.fatal_error is not None:
        print(f"Error: internal error: {app.fatal_error}", file=sys.stderr)
        return 1
    return app.return_code or 0


def main() -> None:
    """Parse arguments and run the application."""
    sys.exit(run())


if __name__ == "__main__":
    main()

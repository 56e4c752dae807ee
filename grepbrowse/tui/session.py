"""
Session state for one browsing run.

Provides:
- SessionController: selection/viewport state and key-to-command mapping
- BrowseSession: the object owning the store, handles and controller
- load_session(): drain a producer into a session, or report why not
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from grepbrowse.config import BrowseConfig
from grepbrowse.launcher import Producer
from grepbrowse.match_formats import GrepLineParser, MatchParser
from grepbrowse.store import Match, MatchHandle, MatchStore

logger = logging.getLogger(__name__)

UNPARSABLE_MESSAGE = (
    "Unable to parse matches. (Did you forget to specify the '-n' option to grep?)"
)
NO_MATCHES_MESSAGE = "No matches."


class Command(Enum):
    """What the event loop should do after a key press."""

    IGNORED = "ignored"
    MOVED = "moved"
    ACTIVATE = "activate"
    QUIT = "quit"


class SessionController:
    """Selection and scroll state over a fixed number of list rows.

    All movements clamp at the first and last row; nothing wraps.

    Attributes:
        count: Number of rows.
        selection: Index of the selected row.
        viewport: Index of the first visible row.
    """

    KEYMAP: dict[str, str] = {
        "j": "next_item",
        "down": "next_item",
        "k": "prev_item",
        "up": "prev_item",
        "pagedown": "page_down",
        "pageup": "page_up",
    }
    ACTIVATE_KEYS = frozenset({"enter"})
    QUIT_KEYS = frozenset({"q", "escape"})

    def __init__(self, count: int, page_size: int = 1) -> None:
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        self.count = count
        self.selection = 0
        self.viewport = 0
        self._page_size = max(1, page_size)

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._page_size = max(1, value)
        self._follow_selection()

    @property
    def last_index(self) -> int:
        return self.count - 1

    def _follow_selection(self) -> None:
        if self.selection < self.viewport:
            self.viewport = self.selection
        elif self.selection >= self.viewport + self._page_size:
            self.viewport = self.selection - self._page_size + 1
        max_viewport = max(0, self.count - self._page_size)
        self.viewport = min(self.viewport, max_viewport)

    def move(self, delta: int) -> bool:
        """Move the selection by delta rows, clamped.

        Returns:
            True if the selection changed.
        """
        target = min(max(self.selection + delta, 0), self.last_index)
        if target == self.selection:
            return False
        self.selection = target
        self._follow_selection()
        return True

    def next_item(self) -> bool:
        return self.move(1)

    def prev_item(self) -> bool:
        return self.move(-1)

    def page_down(self) -> bool:
        return self.move(self._page_size)

    def page_up(self) -> bool:
        return self.move(-self._page_size)

    def handle_key(self, key: str) -> Command:
        """Apply a key press and return what the event loop should do."""
        if key in self.QUIT_KEYS:
            return Command.QUIT
        if key in self.ACTIVATE_KEYS:
            return Command.ACTIVATE
        transition = self.KEYMAP.get(key)
        if transition is None:
            return Command.IGNORED
        getattr(self, transition)()
        return Command.MOVED


@dataclass(frozen=True)
class EmptyOutcome:
    """Result of a run that parsed no matches."""

    message: str | None
    exit_code: int


def empty_outcome(status: int) -> EmptyOutcome:
    """Decide the message and exit code when no matches were parsed.

    Args:
        status: The producer's exit status.

    Returns:
        For status 0 the producer printed something unparsable; for status 1
        it found nothing; any other status is passed through silently.
    """
    if status == 0:
        return EmptyOutcome(UNPARSABLE_MESSAGE, 0)
    if status == 1:
        return EmptyOutcome(NO_MATCHES_MESSAGE, 1)
    return EmptyOutcome(None, status)


@dataclass
class BrowseSession:
    """Everything one interactive run owns."""

    store: MatchStore
    handles: list[MatchHandle]
    controller: SessionController
    config: BrowseConfig = field(default_factory=BrowseConfig)

    @classmethod
    def from_store(
        cls, store: MatchStore, config: BrowseConfig | None = None
    ) -> "BrowseSession":
        """Finalize a populated store and wrap it in a session."""
        handles = store.finalize()
        return cls(
            store=store,
            handles=handles,
            controller=SessionController(len(handles)),
            config=config or BrowseConfig(),
        )

    @property
    def match_count(self) -> int:
        return len(self.handles)

    def selected_handle(self) -> MatchHandle:
        return self.handles[self.controller.selection]

    def resolve(self, handle: MatchHandle | None) -> Match:
        return self.store.resolve(handle)

    def close(self) -> None:
        self.handles = []
        self.store.close()


@dataclass(frozen=True)
class LoadResult:
    """Either a ready session or the outcome of an empty run."""

    session: BrowseSession | None = None
    outcome: EmptyOutcome | None = None


def load_session(
    producer: Producer,
    config: BrowseConfig | None = None,
    parser: MatchParser | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> LoadResult:
    """Drain the producer and build the browsing session.

    The producer is always reaped before returning.

    Args:
        producer: Running producer whose stdout is parsed.
        config: Session configuration.
        parser: Parser to use. Defaults to GrepLineParser.
        progress_callback: Passed through to the parser.

    Returns:
        A LoadResult holding either the session or an EmptyOutcome.
    """
    if parser is None:
        parser = GrepLineParser()
    store = MatchStore()
    with producer:
        count = parser.load_all(producer.stdout, store, progress_callback)
    status = producer.wait()

    if count == 0:
        store.close()
        logger.info("no matches parsed, producer status %d", status)
        return LoadResult(outcome=empty_outcome(status))
    return LoadResult(session=BrowseSession.from_store(store, config))

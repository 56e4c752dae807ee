"""Tests for the session controller and session loading in grepbrowse/tui/session.py."""

from __future__ import annotations

import io
import random

import pytest

from grepbrowse.config import BrowseConfig
from grepbrowse.launcher import Producer
from grepbrowse.tui.session import (
    NO_MATCHES_MESSAGE,
    UNPARSABLE_MESSAGE,
    BrowseSession,
    Command,
    EmptyOutcome,
    SessionController,
    empty_outcome,
    load_session,
)


def fake_producer(data: bytes, status: int) -> Producer:
    """Helper to build a Producer that yields data and exits with status."""
    producer = Producer(["fake"], status=status)
    producer.stdout = io.BytesIO(data)
    return producer


class TestControllerMovement:
    """Tests for SessionController transitions."""

    def test_initial_state(self):
        """Selection and viewport start at the first row."""
        controller = SessionController(5)
        assert controller.selection == 0
        assert controller.viewport == 0

    def test_next_and_prev(self):
        """next/prev move by one row."""
        controller = SessionController(5)
        controller.next_item()
        controller.next_item()
        controller.prev_item()
        assert controller.selection == 1

    def test_next_clamps_at_last(self):
        """next_item() on the last row is a no-op."""
        controller = SessionController(3)
        for _ in range(10):
            controller.next_item()
        assert controller.selection == 2
        assert controller.next_item() is False

    def test_prev_clamps_at_first(self):
        """prev_item() on the first row is a no-op."""
        controller = SessionController(3)
        assert controller.prev_item() is False
        assert controller.selection == 0

    def test_page_down_and_up(self):
        """Paging moves by page_size rows, clamped."""
        controller = SessionController(25, page_size=10)
        controller.page_down()
        assert controller.selection == 10
        controller.page_down()
        controller.page_down()
        assert controller.selection == 24
        controller.page_up()
        assert controller.selection == 14
        controller.page_up()
        controller.page_up()
        assert controller.selection == 0

    def test_single_row(self):
        """A one-row list never moves."""
        controller = SessionController(1, page_size=5)
        assert not controller.next_item()
        assert not controller.page_down()
        assert controller.selection == 0

    def test_random_walk_stays_in_bounds(self):
        """No sequence of moves leaves [0, count - 1]."""
        rng = random.Random(1234)
        controller = SessionController(17, page_size=6)
        moves = [
            controller.next_item,
            controller.prev_item,
            controller.page_down,
            controller.page_up,
        ]
        for _ in range(2000):
            rng.choice(moves)()
            assert 0 <= controller.selection <= 16
            assert controller.viewport <= controller.selection
            assert controller.selection < controller.viewport + controller.page_size

    def test_page_size_minimum(self):
        """page_size never drops below one row."""
        controller = SessionController(5, page_size=0)
        assert controller.page_size == 1
        controller.page_size = -4
        assert controller.page_size == 1

    def test_viewport_follows_selection(self):
        """The viewport scrolls to keep the selection visible."""
        controller = SessionController(50, page_size=10)
        for _ in range(12):
            controller.next_item()
        assert controller.viewport == 3
        controller.page_up()
        assert controller.viewport == 2

    def test_empty_controller_rejected(self):
        """A controller needs at least one row."""
        with pytest.raises(ValueError):
            SessionController(0)


class TestHandleKey:
    """Tests for SessionController.handle_key()."""

    @pytest.mark.parametrize("key", ["j", "down"])
    def test_next_aliases(self, key):
        """j and down both select the next row."""
        controller = SessionController(3)
        assert controller.handle_key(key) is Command.MOVED
        assert controller.selection == 1

    @pytest.mark.parametrize("key", ["k", "up"])
    def test_prev_aliases(self, key):
        """k and up both select the previous row."""
        controller = SessionController(3)
        controller.selection = 2
        assert controller.handle_key(key) is Command.MOVED
        assert controller.selection == 1

    def test_page_keys(self):
        """pagedown and pageup page the selection."""
        controller = SessionController(30, page_size=8)
        controller.handle_key("pagedown")
        assert controller.selection == 8
        controller.handle_key("pageup")
        assert controller.selection == 0

    def test_enter_activates(self):
        """Enter asks for activation without moving."""
        controller = SessionController(3)
        assert controller.handle_key("enter") is Command.ACTIVATE
        assert controller.selection == 0

    @pytest.mark.parametrize("key", ["q", "escape"])
    def test_quit_aliases(self, key):
        """q and escape quit."""
        assert SessionController(3).handle_key(key) is Command.QUIT

    @pytest.mark.parametrize("key", ["x", "home", "end", "left", "space"])
    def test_other_keys_ignored(self, key):
        """Unbound keys change nothing."""
        controller = SessionController(3)
        controller.selection = 1
        assert controller.handle_key(key) is Command.IGNORED
        assert controller.selection == 1


class TestEmptyOutcome:
    """Tests for the zero-matches exit decision."""

    def test_status_zero(self):
        """A successful producer with no parsable output hints at -n."""
        assert empty_outcome(0) == EmptyOutcome(UNPARSABLE_MESSAGE, 0)

    def test_status_one(self):
        """A producer that found nothing reports no matches."""
        assert empty_outcome(1) == EmptyOutcome(NO_MATCHES_MESSAGE, 1)

    @pytest.mark.parametrize("status", [2, 126, 127, 130])
    def test_other_status_passed_through(self, status):
        """Producer failures propagate silently."""
        assert empty_outcome(status) == EmptyOutcome(None, status)


class TestLoadSession:
    """Tests for load_session()."""

    def test_matches_build_session(self, sample_output):
        """Parsed matches produce a finalized session."""
        result = load_session(fake_producer(sample_output, 0))
        assert result.outcome is None
        session = result.session
        assert session.match_count == 3
        assert session.resolve(session.handles[0]).label == "b.c [10]"

    def test_no_matches_status_one(self):
        """Zero records and status 1 report no matches with exit 1."""
        result = load_session(fake_producer(b"", 1))
        assert result.session is None
        assert result.outcome == EmptyOutcome(NO_MATCHES_MESSAGE, 1)

    def test_unparsable_status_zero(self):
        """Zero records and status 0 report the -n hint with exit 0."""
        result = load_session(fake_producer(b"/a/b.c hello\n", 0))
        assert result.outcome == EmptyOutcome(UNPARSABLE_MESSAGE, 0)

    def test_producer_pipe_closed(self, sample_output):
        """The producer's pipe is closed after loading."""
        producer = fake_producer(sample_output, 0)
        load_session(producer)
        assert producer.stdout.closed

    def test_config_carried(self, sample_output):
        """The session keeps the config it was loaded with."""
        config = BrowseConfig(editor=["nano"])
        result = load_session(fake_producer(sample_output, 0), config)
        assert result.session.config.editor == ["nano"]


class TestBrowseSession:
    """Tests for BrowseSession."""

    def test_selected_handle_follows_controller(self, sample_session):
        """selected_handle() tracks the controller's selection."""
        sample_session.controller.next_item()
        match = sample_session.resolve(sample_session.selected_handle())
        assert match.filepath == "src/main.py"

    def test_close(self, sample_session: BrowseSession):
        """close() releases the store."""
        sample_session.close()
        assert len(sample_session.store) == 0
        assert sample_session.handles == []

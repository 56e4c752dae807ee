"""Pytest configuration and shared fixtures for grepbrowse tests."""

from __future__ import annotations

import io
from typing import Generator

import pytest

from grepbrowse import logging_setup
from grepbrowse.match_formats import GrepLineParser
from grepbrowse.store import MatchStore
from grepbrowse.tui.session import BrowseSession


def _session_from(data: bytes) -> BrowseSession:
    store = MatchStore()
    GrepLineParser().load_all(io.BytesIO(data), store)
    return BrowseSession.from_store(store)


@pytest.fixture
def sample_output() -> bytes:
    """Return three lines of typical grep -n output."""
    return (
        b"/a/b.c:10:hello world\n"
        b"src/main.py:3:import os\n"
        b"README:42:see: the docs\n"
    )


@pytest.fixture
def sample_session(sample_output: bytes) -> BrowseSession:
    """Return a session over sample_output."""
    return _session_from(sample_output)


@pytest.fixture
def large_session() -> BrowseSession:
    """Return a session with enough matches to need paging."""
    data = b"".join(
        f"src/file{i % 7}.py:{i + 1}:match number {i}\n".encode() for i in range(100)
    )
    return _session_from(data)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop any logging configuration a test installed."""
    yield
    logging_setup.reset()

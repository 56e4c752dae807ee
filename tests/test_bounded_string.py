"""Tests for BoundedString in grepbrowse/match_formats/bounded.py."""

from __future__ import annotations

import pytest

from grepbrowse.match_formats import BoundedString


class TestBoundedStringAppend:
    """Tests for BoundedString.append()."""

    def test_append_within_bound(self):
        """Characters below the bound are stored."""
        buf = BoundedString(8)
        for ch in "abc":
            buf.append(ch)
        assert buf.value == "abc"
        assert len(buf) == 3

    def test_holds_capacity_minus_one(self):
        """The last slot is reserved for the terminator."""
        buf = BoundedString(4)
        for ch in "abcdefg":
            buf.append(ch)
        assert buf.value == "abc"
        assert buf.full

    def test_append_count_is_truncated(self):
        """A repeated append stops at the bound."""
        buf = BoundedString(6)
        buf.append("x", 3)
        stored = buf.append(" ", 4)
        assert stored == 2
        assert buf.value == "xxx  "

    def test_append_when_full_stores_nothing(self):
        """Appending to a full buffer is a no-op."""
        buf = BoundedString(2)
        buf.append("a")
        assert buf.append("b") == 0
        assert buf.value == "a"

    def test_capacity_one_holds_nothing(self):
        """A capacity-1 buffer only holds its terminator."""
        buf = BoundedString(1)
        buf.append("a")
        assert buf.value == ""
        assert buf.terminated() == "\0"


class TestBoundedStringLifecycle:
    """Tests for reset and validation."""

    def test_reset_clears(self):
        """reset() empties the buffer."""
        buf = BoundedString(8)
        buf.append("z", 5)
        buf.reset()
        assert buf.value == ""
        assert not buf.full

    def test_terminated_appends_nul(self):
        """terminated() ends with exactly one NUL."""
        buf = BoundedString(8)
        buf.append("q")
        assert buf.terminated() == "q\0"

    def test_invalid_capacity(self):
        """Capacity below one is rejected."""
        with pytest.raises(ValueError):
            BoundedString(0)

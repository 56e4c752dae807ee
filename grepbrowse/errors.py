"""Exception types shared across grepbrowse."""

from __future__ import annotations


class BrowseError(Exception):
    """Base class for fatal grepbrowse errors."""


class LauncherError(BrowseError):
    """Raised when the producer process cannot be created."""


class InternalError(BrowseError):
    """Raised when an internal invariant is violated."""

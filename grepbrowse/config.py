"""
Configuration for grepbrowse.

Protocol constants for the match line format and the runtime settings
resolved from the environment and command line.

Environment:
    - EDITOR: Editor command used to open matches (default: vi)
    - GREPBROWSE_LOG_LEVEL: Log level name (default: WARNING)
    - GREPBROWSE_LOG_FILE: Log file path (default: no log file)
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from typing import Mapping


# Match line protocol: <filepath>:<linenumber>:<description>\n
SEPARATOR = ":"
TAB_REPLACEMENT = " "
TAB_STOP = 4
NONPRINT_REPLACEMENT = "."

# Field bounds, including the terminator slot
MATCH_PATH_LEN = 256
MATCH_DESCRIPTION_LEN = 256
LINE_NUMBER_LEN = 32

# Match store growth increment
MATCH_CHUNK_LEN = 32

DEFAULT_EDITOR = "vi"
EXIT_HINT = "Hit 'q' to exit  "
MENU_MARK = ">"

EDITOR_ENV = "EDITOR"
LOG_LEVEL_ENV = "GREPBROWSE_LOG_LEVEL"
LOG_FILE_ENV = "GREPBROWSE_LOG_FILE"


def split_editor(value: str | None) -> list[str]:
    """Split an editor setting into an argument vector.

    Args:
        value: Raw editor setting, e.g. "vim" or "code -w".

    Returns:
        The argument vector, or [DEFAULT_EDITOR] if value is empty or
        cannot be parsed.

    Examples:
        >>> split_editor("code -w")
        ['code', '-w']
        >>> split_editor(None)
        ['vi']
    """
    if not value:
        return [DEFAULT_EDITOR]
    try:
        parts = shlex.split(value)
    except ValueError:
        parts = []
    return parts or [DEFAULT_EDITOR]


@dataclass(frozen=True)
class BrowseConfig:
    """Resolved runtime settings for one browsing session."""

    editor: list[str] = field(default_factory=lambda: [DEFAULT_EDITOR])
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        editor_override: str | None = None,
    ) -> "BrowseConfig":
        """Build a config from environment variables.

        Args:
            environ: Environment mapping. Defaults to os.environ.
            editor_override: Editor command given on the command line; takes
                precedence over $EDITOR.

        Returns:
            The resolved BrowseConfig.
        """
        if environ is None:
            environ = os.environ
        editor = editor_override or environ.get(EDITOR_ENV)
        return cls(
            editor=split_editor(editor),
            log_level=environ.get(LOG_LEVEL_ENV, "WARNING"),
            log_file=environ.get(LOG_FILE_ENV) or None,
        )

"""Tests for configuration and logging setup."""

from __future__ import annotations

import logging

from grepbrowse import logging_setup
from grepbrowse.config import DEFAULT_EDITOR, BrowseConfig, split_editor


class TestSplitEditor:
    """Tests for split_editor()."""

    def test_simple_editor(self):
        """A bare command becomes a one-element argv."""
        assert split_editor("nvim") == ["nvim"]

    def test_editor_with_arguments(self):
        """Editor arguments are split shell-style."""
        assert split_editor("code -w") == ["code", "-w"]
        assert split_editor("'/opt/my editor/bin/ed' --wait") == [
            "/opt/my editor/bin/ed",
            "--wait",
        ]

    def test_empty_uses_default(self):
        """Unset or blank values fall back to the default editor."""
        assert split_editor(None) == [DEFAULT_EDITOR]
        assert split_editor("") == [DEFAULT_EDITOR]
        assert split_editor("   ") == [DEFAULT_EDITOR]

    def test_unparseable_uses_default(self):
        """An unbalanced quote falls back to the default editor."""
        assert split_editor("vim 'oops") == [DEFAULT_EDITOR]


class TestBrowseConfig:
    """Tests for BrowseConfig.from_env()."""

    def test_defaults(self):
        """An empty environment gives vi and no log file."""
        config = BrowseConfig.from_env({})
        assert config.editor == ["vi"]
        assert config.log_file is None
        assert config.log_level == "WARNING"

    def test_editor_from_env(self):
        """$EDITOR selects the editor."""
        assert BrowseConfig.from_env({"EDITOR": "nano"}).editor == ["nano"]

    def test_override_beats_env(self):
        """The command line editor wins over $EDITOR."""
        config = BrowseConfig.from_env({"EDITOR": "nano"}, editor_override="emacs -nw")
        assert config.editor == ["emacs", "-nw"]

    def test_logging_settings(self, tmp_path):
        """Log level and file come from the environment."""
        log_file = str(tmp_path / "gb.log")
        config = BrowseConfig.from_env(
            {"GREPBROWSE_LOG_LEVEL": "debug", "GREPBROWSE_LOG_FILE": log_file}
        )
        assert config.log_level == "debug"
        assert config.log_file == log_file


class TestLoggingSetup:
    """Tests for logging_setup.configure()."""

    def test_no_file_installs_null_handler(self):
        """Without a log file nothing is written anywhere."""
        runtime = logging_setup.configure(BrowseConfig())
        logger = logging.getLogger("grepbrowse")
        assert runtime.file_path is None
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
        assert logger.propagate is False

    def test_file_handler_writes(self, tmp_path):
        """Records reach the configured log file."""
        log_file = tmp_path / "logs" / "gb.log"
        logging_setup.configure(BrowseConfig(log_level="INFO", log_file=str(log_file)))
        logging.getLogger("grepbrowse.test").info("hello log")
        for handler in logging.getLogger("grepbrowse").handlers:
            handler.flush()
        assert "hello log" in log_file.read_text()

    def test_configure_is_idempotent(self):
        """A second configure() returns the first runtime."""
        first = logging_setup.configure(BrowseConfig(log_level="DEBUG"))
        second = logging_setup.configure(BrowseConfig(log_level="ERROR"))
        assert second is first
        assert first.level == logging.DEBUG

    def test_unknown_level_defaults_to_warning(self):
        """A bogus level name falls back to WARNING."""
        runtime = logging_setup.configure(BrowseConfig(log_level="chatty"))
        assert runtime.level == logging.WARNING
        assert logging_setup.get_runtime() is runtime

"""Logging bootstrap for grepbrowse.

The terminal belongs to the TUI while a session runs, so records are only
written to a rotating log file when one is configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from grepbrowse.config import BrowseConfig


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str | None


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or "WARNING").strip().upper()
    level = getattr(logging, normalized, None)
    if not isinstance(level, int):
        level = logging.WARNING
    return logging.getLevelName(level), level


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=2,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(config: BrowseConfig) -> LoggingRuntime:
    """Configure the grepbrowse logger hierarchy.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level = _parse_level(config.log_level)

    logger = logging.getLogger("grepbrowse")
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_file_handler(level, config.log_file))
    else:
        logger.addHandler(logging.NullHandler())

    _RUNTIME = LoggingRuntime(
        level_name=level_name, level=level, file_path=config.log_file
    )
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME


def reset() -> None:
    """Drop the configured runtime and handlers (used by tests)."""
    global _RUNTIME
    logger = logging.getLogger("grepbrowse")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    _RUNTIME = None

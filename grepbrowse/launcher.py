"""
Producer process launcher.

Runs the search program whose standard output feeds the match parser.
The child's stdout goes into a pipe; stdin and stderr stay attached to the
terminal so the producer can still report its own errors.
"""

from __future__ import annotations

import io
import logging
import subprocess
import sys
from typing import IO, Sequence

from grepbrowse.errors import LauncherError

logger = logging.getLogger(__name__)

# Shell conventions for "not executable" and "not found"
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


def normalize_status(returncode: int) -> int:
    """Map a Popen return code to a shell-style exit status.

    A child killed by signal N reports -N; shells report that as 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class Producer:
    """A running producer process and the read end of its output pipe.

    Use as a context manager so the pipe is closed and the child reaped on
    every exit path.
    """

    def __init__(
        self,
        argv: Sequence[str],
        process: subprocess.Popen | None = None,
        status: int | None = None,
    ) -> None:
        self.argv = list(argv)
        self._process = process
        self._status = status
        if process is not None and process.stdout is not None:
            self.stdout: IO[bytes] = process.stdout
        else:
            self.stdout = io.BytesIO(b"")

    @property
    def pid(self) -> int | None:
        """Return the child pid, or None if no child was started."""
        return self._process.pid if self._process is not None else None

    def wait(self) -> int:
        """Reap the child and return its exit status."""
        if self._status is None:
            assert self._process is not None
            self._status = normalize_status(self._process.wait())
            logger.info("producer %s exited with status %d", self.argv[0], self._status)
        return self._status

    def close(self) -> None:
        """Close the pipe and reap the child."""
        self.stdout.close()
        self.wait()

    def __enter__(self) -> "Producer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def spawn_producer(argv: Sequence[str]) -> Producer:
    """Start argv as a child process with stdout redirected into a pipe.

    Args:
        argv: Program name followed by its arguments.

    Returns:
        A Producer whose stdout is the buffered read end of the pipe. If the
        program cannot be found or executed, a diagnostic is printed to stderr
        and the Producer has an empty stream and status 127 or 126.

    Raises:
        LauncherError: If the pipe or the process cannot be created.
    """
    if not argv:
        raise LauncherError("no producer program given")

    logger.info("spawning producer: %s", " ".join(argv))
    try:
        process = subprocess.Popen(list(argv), stdout=subprocess.PIPE)
    except FileNotFoundError as e:
        print(f"{argv[0]}: {e.strerror}", file=sys.stderr)
        logger.warning("producer %s not found", argv[0])
        return Producer(argv, status=EXIT_NOT_FOUND)
    except PermissionError as e:
        print(f"{argv[0]}: {e.strerror}", file=sys.stderr)
        logger.warning("producer %s not executable", argv[0])
        return Producer(argv, status=EXIT_CANNOT_EXECUTE)
    except OSError as e:
        raise LauncherError(f"cannot start {argv[0]}: {e}") from e

    return Producer(argv, process=process)

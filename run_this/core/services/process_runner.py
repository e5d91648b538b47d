"""
Process runner — the single place where the wrapped command is spawned.

The child inherits stdin, stdout and stderr directly; nothing is
captured, buffered or transformed. We block until it exits.
"""

from __future__ import annotations

import logging
import signal
import subprocess
import time

from run_this.core.services.resolver import ExecutableHandle

logger = logging.getLogger(__name__)

# Exit status used when the child dies without one (e.g. killed by a signal)
ABNORMAL_EXIT = 1


class SpawnError(Exception):
    """Raised when a resolved executable cannot be started."""

    def __init__(self, handle: ExecutableHandle, cause: OSError):
        super().__init__(str(cause))
        self.handle = handle
        self.cause = cause


def exit_status(returncode: int | None) -> int:
    """Map a child's return code to the status we exit with.

    ``subprocess`` reports death-by-signal as a negative return code;
    there is no numeric exit status in that case.
    """
    if returncode is None or returncode < 0:
        return ABNORMAL_EXIT
    return returncode


def run_process(handle: ExecutableHandle, args: list[str] | tuple[str, ...] = ()) -> int:
    """Run a resolved executable to completion with inherited stdio.

    SIGINT is ignored here while the child runs. Ctrl-C at the terminal
    reaches the whole foreground process group, so the child decides
    what an interrupt means and its exit status is forwarded as usual.

    Args:
        handle: Resolved executable.
        args: Arguments passed through verbatim.

    Returns:
        The exit status to forward (see :func:`exit_status`).

    Raises:
        SpawnError: If the process could not be started.
    """
    argv = handle.argv(args)
    executable = str(handle.path) if handle.keep_argv0 else None

    logger.debug("Spawning %s (executable=%s)", argv, executable or argv[0])
    start = time.monotonic()
    try:
        proc = subprocess.Popen(argv, executable=executable)
    except OSError as e:
        logger.debug("Spawn failed for %s: %s", handle.path, e)
        raise SpawnError(handle, e) from e

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        returncode = proc.wait()
    finally:
        signal.signal(signal.SIGINT, previous)

    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info("%s exited with %s after %dms", handle.command, returncode, elapsed_ms)
    return exit_status(returncode)

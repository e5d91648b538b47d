"""
Logging configuration — set up once by the CLI before anything else runs.

The wrapped command shares our stderr, so every diagnostic line is
prefixed with ``run-this:`` to keep it apart from the child's own output.
Logging carries diagnostics only; the not-found notice and install
guidance are written by the CLI directly.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  RUN_THIS_LOG_LEVEL  >  WARNING

A log file can be added with RUN_THIS_LOG_FILE (level: RUN_THIS_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import os
import sys

LEVEL_ENV = "RUN_THIS_LOG_LEVEL"
FILE_ENV = "RUN_THIS_LOG_FILE"
FILE_LEVEL_ENV = "RUN_THIS_LOG_FILE_LEVEL"

# Console formats, by verbosity
_FMT_PLAIN = "run-this: %(message)s"
_FMT_INFO = "run-this: %(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "run-this: %(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"

# File output keeps full detail regardless of console level
_FMT_FILE = "%(asctime)s %(process)d %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> str:
    """Pick the console log level from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for this process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the log file; defaults to ``level``.
    """
    console_level = _parse_level(level)

    if console_level <= logging.DEBUG:
        console_fmt = _FMT_DEBUG
    elif console_level <= logging.INFO:
        console_fmt = _FMT_INFO
    else:
        console_fmt = _FMT_PLAIN

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(console_fmt, datefmt=_DATEFMT_CONSOLE))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(root_level)

    # A broken log stream must never change the wrapped command's outcome
    logging.raiseExceptions = False


def setup_logging_from_env(level: str) -> None:
    """:func:`setup_logging` with the file settings taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(FILE_ENV),
        log_file_level=os.environ.get(FILE_LEVEL_ENV),
    )


def _parse_level(level: str | None) -> int:
    """Level name → numeric level; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING

"""
Run use case — resolve a command, run it, or work out install guidance.

This is the orchestrator behind the CLI. It never prints and never
exits: it returns a RunResult and the CLI turns that into output and
an exit status.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from run_this.core.config.loader import ConfigError, load_config
from run_this.core.models.guidance import Guidance, GuidanceConfig
from run_this.core.models.platform import Platform, detect_platform
from run_this.core.services.guidance import guidance_for
from run_this.core.services.process_runner import SpawnError, run_process
from run_this.core.services.resolver import ExecutableHandle, resolve_executable

logger = logging.getLogger(__name__)

EXIT_USAGE = 1
EXIT_SPAWN_ERROR = 1
EXIT_NOT_FOUND = 127


class Outcome(StrEnum):
    """How an invocation ended."""

    RAN = "ran"
    USAGE = "usage"
    NOT_FOUND = "not_found"
    SPAWN_ERROR = "spawn_error"


@dataclass
class RunResult:
    """Result of one wrapped invocation."""

    command: str
    outcome: Outcome
    exit_code: int
    platform: Platform = Platform.UNKNOWN
    handle: ExecutableHandle | None = None
    guidance: Guidance | None = None
    error: str | None = None
    config_error: ConfigError | None = None


def _load_config_best_effort(
    config_path: Path | None,
) -> tuple[GuidanceConfig, ConfigError | None]:
    try:
        return load_config(config_path), None
    except ConfigError as e:
        logger.debug("Ignoring unusable config %s (%s)", e.path, e.kind)
        return GuidanceConfig(), e


def run_command(
    command: str,
    args: list[str] | tuple[str, ...] = (),
    *,
    platform: Platform | None = None,
    config_path: Path | None = None,
) -> RunResult:
    """Run ``command`` if it resolves, otherwise compute install guidance.

    Args:
        command: Command name (or path) to run.
        args: Arguments passed through untouched.
        platform: Platform whose rules apply (default: detected once here).
        config_path: Guidance file (default: run-this.json in the cwd).
            Only read when the command is not found.

    Returns:
        RunResult describing what happened and which status to exit with.
    """
    if platform is None:
        platform = detect_platform()

    if not command:
        return RunResult(
            command=command,
            outcome=Outcome.USAGE,
            exit_code=EXIT_USAGE,
            platform=platform,
        )

    handle = resolve_executable(command, platform)

    if handle is not None:
        try:
            code = run_process(handle, list(args))
        except SpawnError as e:
            return RunResult(
                command=command,
                outcome=Outcome.SPAWN_ERROR,
                exit_code=EXIT_SPAWN_ERROR,
                platform=platform,
                handle=handle,
                error=str(e),
            )
        return RunResult(
            command=command,
            outcome=Outcome.RAN,
            exit_code=code,
            platform=platform,
            handle=handle,
        )

    config, config_error = _load_config_best_effort(config_path)
    return RunResult(
        command=command,
        outcome=Outcome.NOT_FOUND,
        exit_code=EXIT_NOT_FOUND,
        platform=platform,
        guidance=guidance_for(command, platform, config),
        config_error=config_error,
    )

"""
Executable resolver — is a command invocable from the search path?

Two policies, picked at runtime from the platform tag:

    ExtensionSuffixPolicy   Windows. Executables carry a registered
                            extension (PATHEXT), so ``node`` may live on
                            disk as ``node.EXE`` or ``node.CMD``.
    DirectLookupPolicy      Everything else. A name resolves when a file
                            with the execute bit is found on PATH.

Resolution is stateless. Nothing is cached between calls, and a miss is
a normal result (None), never an exception.
"""

from __future__ import annotations

import logging
import os
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from run_this.core.models.platform import Platform, detect_platform

logger = logging.getLogger(__name__)

# Used when PATHEXT is unset or empty
DEFAULT_PATHEXT: tuple[str, ...] = (".COM", ".EXE", ".BAT", ".CMD")


@dataclass(frozen=True)
class ExecutableHandle:
    """Everything needed to launch a resolved command.

    Attributes:
        command: The name the user asked for.
        path: The file that will actually be executed.
        keep_argv0: If True, the child sees ``command`` as ``argv[0]``
            and ``path`` is passed separately as the executable.
            If False, the child is launched by its full path.
    """

    command: str
    path: Path
    keep_argv0: bool = True

    def argv(self, args: list[str] | tuple[str, ...] = ()) -> list[str]:
        """Build the child's argument vector."""
        head = self.command if self.keep_argv0 else str(self.path)
        return [head, *args]


def _split_search_path(search_path: str | None) -> list[Path]:
    if not search_path:
        return []
    return [Path(entry) for entry in search_path.split(os.pathsep) if entry]


class ResolutionPolicy(ABC):
    """Strategy for turning a command name into an executable path."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Policy identifier, for logging."""

    @abstractmethod
    def resolve(
        self,
        command: str,
        search_path: str | None = None,
    ) -> ExecutableHandle | None:
        """Resolve ``command`` against ``search_path`` (default: $PATH).

        Returns:
            A handle for the first match, or None if nothing matches.
        """


class ExtensionSuffixPolicy(ResolutionPolicy):
    """Windows-style lookup driven by the PATHEXT extension list.

    Directory order always dominates extension order: every candidate
    name is tried in one directory before moving on to the next. A bare
    ``tool`` in a later directory therefore loses to ``tool.EXE`` in an
    earlier one.
    """

    def __init__(self, pathext: str | None = None):
        self._pathext = pathext

    @property
    def name(self) -> str:
        return "extension-suffix"

    def extensions(self) -> list[str]:
        """Recognised extensions in table order, upper-cased."""
        raw = self._pathext
        if raw is None:
            raw = os.environ.get("PATHEXT", "")
        exts = [e.strip().upper() for e in raw.split(";") if e.strip()]
        return exts or list(DEFAULT_PATHEXT)

    def resolve(
        self,
        command: str,
        search_path: str | None = None,
    ) -> ExecutableHandle | None:
        if search_path is None:
            search_path = os.environ.get("PATH")
        if search_path is None:
            return None

        directories = _split_search_path(search_path)
        extensions = self.extensions()

        suffix = os.path.splitext(command)[1].upper()
        if suffix and suffix in extensions:
            # Already carries a recognised extension: exact name only
            for directory in directories:
                candidate = directory / command
                if candidate.is_file():
                    return self._handle(command, candidate)
            return None

        for directory in directories:
            candidate = directory / command
            if candidate.is_file():
                return self._handle(command, candidate)
            for ext in extensions:
                candidate = directory / f"{command}{ext}"
                if candidate.is_file():
                    return self._handle(command, candidate)

        return None

    def _handle(self, command: str, path: Path) -> ExecutableHandle:
        logger.debug("%s: %s → %s", self.name, command, path)
        return ExecutableHandle(command=command, path=path, keep_argv0=False)


class DirectLookupPolicy(ResolutionPolicy):
    """POSIX-style lookup: an executable file on PATH, or a path to one."""

    @property
    def name(self) -> str:
        return "direct-lookup"

    def resolve(
        self,
        command: str,
        search_path: str | None = None,
    ) -> ExecutableHandle | None:
        found = shutil.which(command, path=search_path)
        if found is None:
            return None
        logger.debug("%s: %s → %s", self.name, command, found)
        return ExecutableHandle(command=command, path=Path(found), keep_argv0=True)


def policy_for(platform: Platform, *, pathext: str | None = None) -> ResolutionPolicy:
    """Pick the resolution policy for a platform."""
    if platform == Platform.WINDOWS:
        return ExtensionSuffixPolicy(pathext=pathext)
    return DirectLookupPolicy()


def resolve_executable(
    command: str,
    platform: Platform | None = None,
    *,
    search_path: str | None = None,
    pathext: str | None = None,
) -> ExecutableHandle | None:
    """Resolve a command name to an executable.

    Args:
        command: Command name (or path) as typed by the user.
        platform: Platform whose rules apply (default: detected).
        search_path: Search-path string (default: $PATH).
        pathext: Extension list for the Windows policy (default: $PATHEXT).

    Returns:
        ExecutableHandle for the first match, or None.
    """
    if not command:
        return None
    if platform is None:
        platform = detect_platform()

    policy = policy_for(platform, pathext=pathext)
    handle = policy.resolve(command, search_path)
    if handle is None:
        logger.debug("%s: %s not found", policy.name, command)
    return handle

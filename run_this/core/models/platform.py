"""
Platform model — which operating system family we are running on.

The platform tag is computed once per run and drives two decisions:
which executable-resolution policy applies, and which per-platform
guidance overrides and package-manager hints are shown.
"""

from __future__ import annotations

import platform as _host
from enum import StrEnum


class Platform(StrEnum):
    """Closed set of platform identifiers."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UNKNOWN = "unknown"


_KNOWN: dict[str, Platform] = {
    "windows": Platform.WINDOWS,
    "macos": Platform.MACOS,
    "linux": Platform.LINUX,
}


def host_os_id() -> str:
    """Return the host OS identifier (``windows``, ``macos``, ``linux``, ...).

    ``platform.system()`` reports ``Darwin`` for macOS; everything else
    is simply lower-cased.
    """
    system = _host.system()
    if system == "Darwin":
        return "macos"
    return system.lower()


def detect_platform(os_id: str | None = None) -> Platform:
    """Map an OS identifier to a :class:`Platform`.

    Args:
        os_id: Identifier to classify. Defaults to :func:`host_os_id`.

    Returns:
        The matching platform, or ``Platform.UNKNOWN`` for anything
        unrecognised (including an empty string).
    """
    if os_id is None:
        os_id = host_os_id()
    return _KNOWN.get(os_id, Platform.UNKNOWN)

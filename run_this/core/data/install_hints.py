"""
Built-in install hints — well-known developer tools and package managers.

Pure data, no logic. Consulted only when run-this.json has nothing to
say about a command.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from run_this.core.models.platform import Platform

# ── Well-known tools ────────────────────────────────────────────
# command → (heading, instruction lines)

_RUST = (
    "To install Rust and Cargo, you can run:",
    ("curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh",),
)
_PYTHON = (
    "To install Python, visit:",
    ("https://www.python.org/downloads/",),
)
_PIP = (
    "pip comes with Python. To install Python:",
    ("https://www.python.org/downloads/",),
)

BUILTIN_HINTS: Mapping[str, tuple[str, tuple[str, ...]]] = MappingProxyType({
    "bun": (
        "To install Bun, you can run:",
        ("curl -fsSL https://bun.sh/install | bash",),
    ),
    "npm": (
        "npm comes with Node.js. To install Node.js:",
        ("Visit: https://nodejs.org/",),
    ),
    "yarn": (
        "To install Yarn, you can run:",
        ("npm install -g yarn",),
    ),
    "pnpm": (
        "To install pnpm, you can run:",
        ("npm install -g pnpm",),
    ),
    "cargo": _RUST,
    "rustc": _RUST,
    "rustup": _RUST,
    "go": (
        "To install Go, visit:",
        ("https://golang.org/doc/install",),
    ),
    "python": _PYTHON,
    "python3": _PYTHON,
    "pip": _PIP,
    "pip3": _PIP,
    "docker": (
        "To install Docker, visit:",
        ("https://docs.docker.com/get-docker/",),
    ),
    "git": (
        "To install Git, visit:",
        ("https://git-scm.com/downloads",),
    ),
})


# ── Generic package-manager suggestions ─────────────────────────
# (label, command template); "{command}" is replaced by the missing command

GENERIC_HEADING = "Try installing it using your system's package manager:"

_WINGET = ("Windows (winget)", "winget install {command}")
_CHOCO = ("Windows (Chocolatey)", "choco install {command}")
_SCOOP = ("Windows (Scoop)", "scoop install {command}")
_BREW = ("macOS (Homebrew)", "brew install {command}")
_PORT = ("macOS (MacPorts)", "sudo port install {command}")
_APT = ("Ubuntu/Debian", "sudo apt install {command}")
_DNF = ("Fedora/RHEL", "sudo dnf install {command}")
_PACMAN = ("Arch Linux", "sudo pacman -S {command}")

PACKAGE_MANAGERS: Mapping[Platform, tuple[tuple[str, str], ...]] = MappingProxyType({
    Platform.WINDOWS: (_WINGET, _CHOCO, _SCOOP),
    Platform.MACOS: (_BREW, _PORT),
    Platform.LINUX: (_APT, _DNF, _PACMAN),
    Platform.UNKNOWN: (_BREW, _APT, _DNF, _PACMAN, _WINGET),
})

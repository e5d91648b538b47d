"""
Guidance models — user-overridable install guidance, loaded from run-this.json.

Shape of the file::

    {
        "mytool": {
            "url": "https://example.com/mytool",
            "messages": ["Run the installer from the download page"],
            "linux": {"messages": ["sudo apt install mytool"]},
            "macos": {"url": "https://example.com/mytool/mac"}
        }
    }

Every field is optional. A missing field means "nothing at this level",
so lookups fall through to the next level; it never means "empty".
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel

from run_this.core.models.platform import Platform


class PlatformOverride(BaseModel):
    """Guidance for one command on one platform."""

    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    messages: list[str] | None = None


class CommandGuidance(BaseModel):
    """Guidance for one command: command-wide defaults plus platform overrides."""

    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    messages: list[str] | None = None

    windows: PlatformOverride | None = None
    macos: PlatformOverride | None = None
    linux: PlatformOverride | None = None

    def override_for(self, platform: Platform) -> PlatformOverride | None:
        """Return the override block for a platform (None for Unknown)."""
        if platform == Platform.WINDOWS:
            return self.windows
        if platform == Platform.MACOS:
            return self.macos
        if platform == Platform.LINUX:
            return self.linux
        return None


class GuidanceConfig(RootModel[dict[str, CommandGuidance]]):
    """Command name → guidance. Names match exactly (case-sensitive)."""

    root: dict[str, CommandGuidance] = Field(default_factory=dict)

    def get(self, command: str) -> CommandGuidance | None:
        """Look up the entry for a command."""
        return self.root.get(command)

    def __contains__(self, command: object) -> bool:
        return command in self.root

    def __len__(self) -> int:
        return len(self.root)


class GuidanceSource(StrEnum):
    """Which tier produced a piece of guidance."""

    CONFIGURED = "configured"
    BUILTIN = "builtin"
    GENERIC = "generic"


class Guidance(BaseModel):
    """What to show the user after a command was not found."""

    source: GuidanceSource
    heading: str = ""
    lines: list[str] = Field(default_factory=list)


GuidanceField = Literal["url", "messages"]

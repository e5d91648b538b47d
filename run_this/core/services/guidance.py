"""
Guidance resolver — decide what to tell the user about a missing command.

Three tiers, first non-empty one wins and they never mix:

    configured  run-this.json entry for the command. URL and messages
                are each looked up platform override → command default,
                independently of one another.
    builtin     fixed instructions for well-known developer tools.
    generic     package-manager commands for the detected platform.
"""

from __future__ import annotations

import logging

from run_this.core.data.install_hints import (
    BUILTIN_HINTS,
    GENERIC_HEADING,
    PACKAGE_MANAGERS,
)
from run_this.core.models.guidance import (
    CommandGuidance,
    Guidance,
    GuidanceConfig,
    GuidanceField,
    GuidanceSource,
)
from run_this.core.models.platform import Platform

logger = logging.getLogger(__name__)

CONFIGURED_HEADING = "To install, you can:"


def layered_lookup(
    entry: CommandGuidance,
    platform: Platform,
    field: GuidanceField,
) -> str | list[str] | None:
    """Resolve one guidance field: platform override first, then the default.

    A field that is present but empty (``"messages": []``) still counts
    as present and stops the cascade.
    """
    override = entry.override_for(platform)
    if override is not None:
        value = getattr(override, field)
        if value is not None:
            return value
    return getattr(entry, field)


def configured_guidance(
    command: str,
    platform: Platform,
    config: GuidanceConfig | None,
) -> Guidance | None:
    """Guidance from the user's configuration, or None if it has nothing."""
    if config is None:
        return None
    entry = config.get(command)
    if entry is None:
        return None

    url = layered_lookup(entry, platform, "url")
    messages = layered_lookup(entry, platform, "messages")
    if url is None and messages is None:
        return None

    lines: list[str] = []
    if url is not None:
        lines.append(f"Visit: {url}")
    if messages is not None:
        lines.extend(messages)

    return Guidance(
        source=GuidanceSource.CONFIGURED,
        heading=CONFIGURED_HEADING,
        lines=lines,
    )


def builtin_guidance(command: str) -> Guidance | None:
    """Guidance from the built-in table of well-known tools."""
    hint = BUILTIN_HINTS.get(command)
    if hint is None:
        return None
    heading, lines = hint
    return Guidance(source=GuidanceSource.BUILTIN, heading=heading, lines=list(lines))


def generic_guidance(command: str, platform: Platform) -> Guidance:
    """Package-manager suggestions for the platform (all of them for Unknown)."""
    lines = [
        f"• {label}: {template.format(command=command)}"
        for label, template in PACKAGE_MANAGERS[platform]
    ]
    return Guidance(source=GuidanceSource.GENERIC, heading=GENERIC_HEADING, lines=lines)


def guidance_for(
    command: str,
    platform: Platform,
    config: GuidanceConfig | None = None,
) -> Guidance:
    """Pick the single most specific guidance for a missing command.

    Args:
        command: The command that was not found.
        platform: Detected platform.
        config: Loaded configuration (None or empty if there is none).

    Returns:
        Guidance from exactly one tier.
    """
    guidance = configured_guidance(command, platform, config)
    if guidance is None:
        guidance = builtin_guidance(command)
    if guidance is None:
        guidance = generic_guidance(command, platform)

    logger.debug("Guidance for %s on %s: %s", command, platform, guidance.source)
    return guidance

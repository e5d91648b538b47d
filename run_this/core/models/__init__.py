"""
Domain models — platform tag and install-guidance types.

All models are re-exported here for convenient access:

    from run_this.core.models import Platform, CommandGuidance, GuidanceConfig
"""

from run_this.core.models.guidance import (
    CommandGuidance,
    Guidance,
    GuidanceConfig,
    GuidanceSource,
    PlatformOverride,
)
from run_this.core.models.platform import Platform, detect_platform

__all__ = [
    # guidance.py
    "CommandGuidance",
    "Guidance",
    "GuidanceConfig",
    "GuidanceSource",
    # platform.py
    "Platform",
    "PlatformOverride",
    "detect_platform",
]

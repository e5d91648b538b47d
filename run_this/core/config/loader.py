"""
Configuration loader — reads run-this.json into guidance models.

The file is optional. A missing file is simply an empty configuration;
a file that cannot be read or parsed raises ConfigError so the caller
can report it and carry on without configuration.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from run_this.core.models.guidance import GuidanceConfig

logger = logging.getLogger(__name__)

# Default config filename, looked up in the current working directory
CONFIG_FILE = "run-this.json"


class ConfigError(Exception):
    """Raised when run-this.json exists but cannot be used.

    ``kind`` is ``"read"`` for I/O failures and ``"parse"`` for invalid
    JSON or a document that does not match the expected shape.
    """

    def __init__(self, message: str, *, path: Path, kind: str = "parse"):
        super().__init__(message)
        self.path = path
        self.kind = kind


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the path to run-this.json in ``start_dir`` (default: cwd), if any.

    Unlike project-wide tools this does not walk up parent directories:
    guidance is scoped to the directory the command is run from.
    """
    candidate = (start_dir or Path.cwd()) / CONFIG_FILE
    return candidate if candidate.exists() else None


def load_config(path: Path | None = None) -> GuidanceConfig:
    """Load and validate guidance configuration.

    Args:
        path: Explicit path to a config file. If None, looks for
            run-this.json in the current working directory.

    Returns:
        The validated configuration. Empty when there is no file.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON,
            or does not describe a command → guidance mapping.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s in %s", CONFIG_FILE, Path.cwd())
            return GuidanceConfig()
    elif not path.exists():
        logger.debug("Config file %s does not exist", path)
        return GuidanceConfig()

    logger.debug("Loading guidance config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(str(e), path=path, kind="read") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(str(e), path=path) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"expected a JSON object, got {type(data).__name__}",
            path=path,
        )

    try:
        config = GuidanceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(e), path=path) from e

    logger.info("Loaded guidance for %d command(s) from %s", len(config), path)
    return config

"""
Shared test fixtures and configuration.
"""

import json
import logging
import random
import string
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def write_config(workdir: Path) -> Callable[[dict], Path]:
    """Write a run-this.json into the working directory."""

    def _write(data: dict) -> Path:
        path = workdir / "run-this.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def missing_command() -> str:
    """A command name that will not be on anyone's PATH."""
    rng = random.Random()
    return "rt-" + "".join(rng.choices(string.ascii_lowercase + string.digits, k=20))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

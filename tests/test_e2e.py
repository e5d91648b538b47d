"""
End-to-end tests — the real CLI in a child interpreter.

CliRunner captures Python-level streams only, while the wrapped command
writes straight to the inherited file descriptors. These tests run
``python -m run_this.main`` as a separate process to see real output.
"""

from __future__ import annotations

import json
import os
import shutil
import signal
import stat
import subprocess
import sys
import time
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent


def _run(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(ROOT), env.get("PYTHONPATH", "")) if p
    )
    env["NO_COLOR"] = "1"
    return subprocess.run(
        [sys.executable, "-m", "run_this.main", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestEndToEnd:
    def test_no_command(self, tmp_path: Path):
        proc = _run([], tmp_path)
        assert proc.returncode == 1
        assert "No command specified" in proc.stderr

    def test_double_dash_only(self, tmp_path: Path):
        proc = _run(["--"], tmp_path)
        assert proc.returncode == 1
        assert "--" in proc.stderr

    def test_not_found(self, tmp_path: Path, missing_command: str):
        proc = _run(["--", missing_command], tmp_path)
        assert proc.returncode == 127
        assert "not found" in proc.stderr
        assert missing_command in proc.stderr
        assert "package manager" in proc.stderr

    def test_configured_guidance(self, tmp_path: Path, missing_command: str):
        (tmp_path / "run-this.json").write_text(json.dumps({
            missing_command: {
                "url": "https://example.com/test",
                "messages": ["Custom installation message"],
            },
        }))
        proc = _run(["--", missing_command], tmp_path)
        assert proc.returncode == 127
        assert "https://example.com/test" in proc.stderr
        assert "Custom installation message" in proc.stderr
        assert "package manager" not in proc.stderr

    @pytest.mark.skipif(shutil.which("echo") is None, reason="no echo executable on PATH")
    def test_existing_command(self, tmp_path: Path):
        proc = _run(["--", "echo", "Hello, world!"], tmp_path)
        assert proc.returncode == 0
        assert proc.stdout.strip() == "Hello, world!"

    def test_child_exit_code_forwarded(self, tmp_path: Path):
        proc = _run([sys.executable, "-c", "import sys; sys.exit(7)"], tmp_path)
        assert proc.returncode == 7
        assert proc.stderr == ""


def _start_in_own_session(script: Path, cwd: Path) -> subprocess.Popen:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(ROOT), env.get("PYTHONPATH", "")) if p
    )
    return subprocess.Popen(
        [sys.executable, "-m", "run_this.main", str(script)],
        cwd=cwd,
        env=env,
        stdout=subprocess.PIPE,
        text=True,
        start_new_session=True,
    )


def _interrupt_group(proc: subprocess.Popen) -> tuple[int, str]:
    """Wait for the child to report ready, then Ctrl-C the whole group."""
    assert proc.stdout.readline() == "ready\n"
    time.sleep(0.2)
    os.killpg(proc.pid, signal.SIGINT)
    out = proc.stdout.read()
    return proc.wait(timeout=30), out


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX process groups")
class TestInterrupt:
    def test_child_handling_interrupt_decides_status(self, tmp_path: Path):
        script = tmp_path / "trapper"
        script.write_text(
            "#!/bin/sh\n"
            "trap 'echo caught; exit 0' INT\n"
            "echo ready\n"
            "while true; do sleep 0.05; done\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        rc, out = _interrupt_group(_start_in_own_session(script, tmp_path))
        assert out == "caught\n"
        assert rc == 0

    def test_child_killed_by_interrupt_exits_1(self, tmp_path: Path):
        script = tmp_path / "sleeper"
        script.write_text("#!/bin/sh\necho ready\nexec sleep 30\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        rc, _ = _interrupt_group(_start_in_own_session(script, tmp_path))
        assert rc == 1

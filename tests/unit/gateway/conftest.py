"""Fixtures for exercising real executors against throwaway CLI scripts."""

import os
import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

FAKE_CLI_TEMPLATE = """#!/bin/sh
: > "{args_file}"
for arg in "$@"; do printf '%s\\0' "$arg" >> "{args_file}"; done
cat > "{stdin_file}"
printf '%b' '{stdout}'
printf '%b' '{stderr}' >&2
exit {exit_code}
"""


@dataclass(frozen=True)
class FakeCli:
    """Paths written by an installed fake CLI script."""

    args_file: Path
    stdin_file: Path

    @property
    def args(self) -> list[str]:
        """Argument vector received by the script, excluding argv[0]."""
        raw = self.args_file.read_bytes().decode("utf-8")
        return raw.split("\0")[:-1]

    @property
    def stdin(self) -> str:
        return self.stdin_file.read_text(encoding="utf-8")


InstallFakeCli = Callable[..., FakeCli]


@pytest.fixture
def install_fake_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> InstallFakeCli:
    """Install a shell script named `binary` first on PATH.

    The script records its argv and stdin, prints `stdout`/`stderr` (printf %b
    escapes allowed) and exits with `exit_code`.
    """
    if sys.platform == "win32":
        pytest.skip("fake CLI scripts require a POSIX shell")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def install(binary: str, *, stdout: str = "", stderr: str = "", exit_code: int = 0) -> FakeCli:
        fake = FakeCli(
            args_file=tmp_path / f"{binary}.args",
            stdin_file=tmp_path / f"{binary}.stdin",
        )
        script = bin_dir / binary
        script.write_text(
            FAKE_CLI_TEMPLATE.format(
                args_file=fake.args_file,
                stdin_file=fake.stdin_file,
                stdout=stdout,
                stderr=stderr,
                exit_code=exit_code,
            ),
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return fake

    return install


@pytest.fixture
def empty_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point PATH at an empty directory so no provider binary is found."""
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))

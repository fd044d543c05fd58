"""Subprocess capability injected into components that call external tools."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runs *args* to completion and returns its captured output.

    Raises ``OSError`` when the executable cannot be started.
    """

    def __call__(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult: ...


def run_command(args: Sequence[str], cwd: Path | None = None) -> CommandResult:
    completed = subprocess.run(
        list(args),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    return CommandResult(completed.returncode, completed.stdout, completed.stderr)

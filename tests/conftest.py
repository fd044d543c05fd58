"""Shared fixtures for the libkit test suite."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

import pytest

from libkit.core import CommandResult, KitConfig
from libkit.core.config import default_templates_dir


class FakeRunner:
    """Records invocations and answers from a table keyed by argv tuple."""

    def __init__(
        self,
        results: dict[tuple[str, ...], CommandResult] | None = None,
        missing: Iterable[str] = (),
    ) -> None:
        self.results = results or {}
        self.missing = set(missing)
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []

    def __call__(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        argv = tuple(args)
        self.calls.append((argv, cwd))
        if argv[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return self.results.get(argv, CommandResult(0))


class ScriptedPrompt:
    """Answers prompts from a list; an exhausted script behaves like a closed stdin."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers = list(answers)
        self.questions: list[tuple[str, str]] = []

    def __call__(self, question: str, default: str) -> str:
        self.questions.append((question, default))
        if not self.answers:
            return default
        return self.answers.pop(0) or default


GIT_IDENTITY = {
    ("git", "config", "user.name"): CommandResult(0, "Ada Lovelace\n"),
    ("git", "config", "user.email"): CommandResult(0, "ada@example.com\n"),
}


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def config(tmp_path: Path, project_dir: Path) -> KitConfig:
    return KitConfig(
        project_dir=project_dir,
        templates_dir=default_templates_dir(),
        backup_dir=tmp_path / "backup",
        install_command=("uv", "sync"),
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(dict(GIT_IDENTITY))

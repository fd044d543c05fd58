"""Configuration dataclass shared by every kit component."""

from __future__ import annotations

import importlib.resources as ilr
import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

BACKUP_SUFFIX = ".backup"
ENV_FILENAME = ".env"

DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("uv", "sync")
DEFAULT_RULES_REPO = "https://github.com/zackiles/cursor-config"


def default_templates_dir() -> Path:
    """Location of the templates shipped with the package."""
    return Path(str(ilr.files("libkit").joinpath("templates")))


@dataclass(kw_only=True)
class KitConfig:
    """
    Configuration for one kit invocation.

    Attributes:
        project_dir: Directory the generated files are written to and restored into.
        templates_dir: Directory holding the ``*.template*`` source files.
        backup_dir: Directory receiving ``<name>.backup`` copies. Defaults to
            ``templates_dir / "backup"``.
        install_command: Package manager invocation run after generation.
        rules_repo: Git repository the ``update`` command pulls editor rules from.
        env: Values read from the project's ``.env`` file.
    """

    project_dir: Path = field(default_factory=Path.cwd)
    templates_dir: Path = field(default_factory=default_templates_dir)
    backup_dir: Path = None  # type: ignore[assignment]
    install_command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND
    rules_repo: str = DEFAULT_RULES_REPO
    env: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.install_command:
            raise ValueError("install_command must not be empty.")
        if not self.rules_repo:
            raise ValueError("rules_repo must not be empty.")
        self.project_dir = Path(self.project_dir)
        self.templates_dir = Path(self.templates_dir)
        if self.backup_dir is None:
            self.backup_dir = self.templates_dir / "backup"
        else:
            self.backup_dir = Path(self.backup_dir)

    @classmethod
    def load(cls, project_dir: Path | None = None) -> KitConfig:
        """Build a config from ``<project_dir>/.env`` and ``LIBKIT_*`` environment variables.

        Process environment variables win over values from the ``.env`` file.
        """
        root = Path(project_dir) if project_dir is not None else Path.cwd()
        env_file = root / ENV_FILENAME
        file_values = dotenv_values(env_file, interpolate=False) if env_file.is_file() else {}
        env = {k: v for k, v in file_values.items() if v is not None}

        def lookup(key: str) -> str | None:
            return os.environ.get(key) or env.get(key)

        kwargs: dict[str, object] = {"project_dir": root, "env": env}
        if templates := lookup("LIBKIT_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(templates)
        if backups := lookup("LIBKIT_BACKUP_DIR"):
            kwargs["backup_dir"] = Path(backups)
        if install := lookup("LIBKIT_INSTALL_COMMAND"):
            kwargs["install_command"] = tuple(shlex.split(install))
        if repo := lookup("LIBKIT_RULES_REPO"):
            kwargs["rules_repo"] = repo

        return cls(**kwargs)  # type: ignore[arg-type]

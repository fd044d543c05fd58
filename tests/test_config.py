"""Tests for libkit.core.config — KitConfig."""

from pathlib import Path

import pytest

from libkit.core.config import (
    DEFAULT_INSTALL_COMMAND,
    DEFAULT_RULES_REPO,
    KitConfig,
    default_templates_dir,
)


class TestKitConfig:
    def test_defaults(self, tmp_path):
        c = KitConfig(project_dir=tmp_path)
        assert c.templates_dir == default_templates_dir()
        assert c.backup_dir == c.templates_dir / "backup"
        assert c.install_command == DEFAULT_INSTALL_COMMAND
        assert c.rules_repo == DEFAULT_RULES_REPO
        assert dict(c.env) == {}

    def test_explicit_backup_dir(self, tmp_path):
        c = KitConfig(project_dir=tmp_path, backup_dir=tmp_path / "bk")
        assert c.backup_dir == tmp_path / "bk"

    def test_paths_are_coerced(self, tmp_path):
        c = KitConfig(project_dir=str(tmp_path), templates_dir=str(tmp_path / "t"))
        assert isinstance(c.project_dir, Path)
        assert c.backup_dir == tmp_path / "t" / "backup"

    def test_packaged_templates_exist(self):
        assert default_templates_dir().is_dir()

    def test_empty_install_command_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="install_command"):
            KitConfig(project_dir=tmp_path, install_command=())

    def test_empty_rules_repo_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="rules_repo"):
            KitConfig(project_dir=tmp_path, rules_repo="")


class TestLoad:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for key in (
            "LIBKIT_TEMPLATES_DIR",
            "LIBKIT_BACKUP_DIR",
            "LIBKIT_INSTALL_COMMAND",
            "LIBKIT_RULES_REPO",
        ):
            monkeypatch.delenv(key, raising=False)

    def test_without_env_file(self, tmp_path):
        c = KitConfig.load(tmp_path)
        assert c.project_dir == tmp_path
        assert dict(c.env) == {}

    def test_reads_env_file(self, tmp_path):
        (tmp_path / ".env").write_text(
            "PACKAGE_NAME=@my-org/my-lib\n"
            "LIBKIT_INSTALL_COMMAND=pip install -e .\n"
            f"LIBKIT_BACKUP_DIR={tmp_path / 'bk'}\n"
        )

        c = KitConfig.load(tmp_path)

        assert c.env["PACKAGE_NAME"] == "@my-org/my-lib"
        assert c.install_command == ("pip", "install", "-e", ".")
        assert c.backup_dir == tmp_path / "bk"

    def test_process_env_wins(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("LIBKIT_RULES_REPO=https://example.com/a.git\n")
        monkeypatch.setenv("LIBKIT_RULES_REPO", "https://example.com/b.git")
        monkeypatch.setenv("LIBKIT_TEMPLATES_DIR", str(tmp_path / "tpl"))

        c = KitConfig.load(tmp_path)

        assert c.rules_repo == "https://example.com/b.git"
        assert c.templates_dir == tmp_path / "tpl"
        assert c.backup_dir == tmp_path / "tpl" / "backup"

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert KitConfig.load().project_dir == tmp_path

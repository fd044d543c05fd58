"""Refreshing the project's editor rules folder from a git repository."""

from __future__ import annotations

import logging
import shutil

from libkit.core.config import KitConfig
from libkit.core.runner import CommandRunner, run_command

log = logging.getLogger(__name__)

RULES_DIRNAME = ".cursor"
_TEMP_DIRNAME = "__temp_cursor_config"


def update_rules(config: KitConfig, runner: CommandRunner = run_command) -> bool:
    """Replace ``<project_dir>/.cursor`` with the one from ``config.rules_repo``."""
    log.info("🔄 Fetching and copying editor configuration from %s...", config.rules_repo)

    temp_dir = config.project_dir / _TEMP_DIRNAME
    try:
        if temp_dir.exists():
            shutil.rmtree(temp_dir)
        temp_dir.mkdir(parents=True)

        log.info("📥 Cloning %s into temporary directory...", config.rules_repo)
        try:
            result = runner(["git", "clone", "--depth", "1", config.rules_repo, str(temp_dir)])
        except OSError as e:
            log.error("❌ Failed to run git: %s", e)
            return False
        if not result.ok:
            log.error("❌ Failed to clone repository: %s", result.stderr.strip())
            return False

        source = temp_dir / RULES_DIRNAME
        if not source.is_dir():
            log.error("❌ %s folder not found in the cloned repository", RULES_DIRNAME)
            return False

        target = config.project_dir / RULES_DIRNAME
        if target.exists():
            log.info("🗑️ Removing existing %s folder...", RULES_DIRNAME)
            shutil.rmtree(target)

        log.info("📂 Copying %s folder to project root...", RULES_DIRNAME)
        shutil.copytree(source, target)
        log.info("✅ Successfully copied %s folder to project root", RULES_DIRNAME)
        return True
    except OSError as e:
        log.error("❌ Error fetching and copying editor configuration: %s", e)
        return False
    finally:
        if temp_dir.exists():
            shutil.rmtree(temp_dir, ignore_errors=True)
            log.info("🧹 Cleaned up temporary files")

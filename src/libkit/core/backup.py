"""Single-slot backups of destination files and restoring them."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from libkit.core.config import BACKUP_SUFFIX, KitConfig

log = logging.getLogger(__name__)


class BackupManager:
    """
    Copies files aside before they are overwritten and puts them back on reset.

    A backup lives at ``<backup_dir>/<basename>.backup``. There is no manifest:
    the original location is recovered from the file name alone, relative to
    the project directory.
    """

    def __init__(self, config: KitConfig) -> None:
        self.backup_dir = config.backup_dir
        self.project_dir = config.project_dir

    def ensure_backup_dir(self) -> None:
        """Create the backup directory. Errors other than "already exists" propagate."""
        self.backup_dir.mkdir(parents=True, exist_ok=True)

    def backup_path(self, path: Path) -> Path:
        return self.backup_dir / f"{path.name}{BACKUP_SUFFIX}"

    def backup(self, path: Path) -> bool:
        """Copy *path* into the backup directory. Returns ``False`` if nothing was backed up."""
        path = Path(path)
        if not path.exists():
            log.debug("No existing %s, nothing to back up", path)
            return False

        target = self.backup_path(path)
        try:
            shutil.copyfile(path, target)
        except OSError as e:
            log.warning("⚠️ Failed to backup %s: %s", path, e)
            return False

        log.info("🔄 Backed up %s to %s", path, target)
        return True

    def list_backups(self) -> list[Path]:
        if not self.backup_dir.is_dir():
            return []
        return sorted(
            p for p in self.backup_dir.iterdir() if p.is_file() and p.name.endswith(BACKUP_SUFFIX)
        )

    def restore_all(self) -> int:
        """
        Copy every backup back over its original and delete the consumed backups.

        Returns the number of restored files. A missing backup directory restores
        nothing. A backup whose restore fails is kept for the next attempt.
        """
        log.info("🔄 Restoring backup files...")

        if not self.backup_dir.is_dir():
            log.info("❓ No backup directory found. Nothing to restore.")
            return 0

        try:
            backups = self.list_backups()
        except OSError as e:
            log.error("❌ Error restoring backup files: %s", e)
            return 0

        restored: list[Path] = []
        for backup in backups:
            original = backup.name[: -len(BACKUP_SUFFIX)]
            target = self.project_dir / original
            try:
                shutil.copyfile(backup, target)
            except OSError as e:
                log.error("❌ Failed to restore %s: %s", target, e)
                continue
            log.info("✅ Restored %s from %s", target, backup)
            restored.append(backup)

        if not restored:
            log.info("❓ No backup files found to restore.")
            return 0

        log.info("🎉 Restored %d file(s) from backups.", len(restored))
        self._remove(restored)
        return len(restored)

    def _remove(self, backups: list[Path]) -> None:
        log.info("🧹 Removing backup files...")
        removed = 0
        for backup in backups:
            try:
                backup.unlink()
            except OSError as e:
                log.error("❌ Failed to remove %s: %s", backup, e)
                continue
            log.info("🗑️ Removed %s", backup)
            removed += 1
        log.info("🎉 Removed %d backup file(s).", removed)

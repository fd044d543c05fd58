"""Template generation building blocks."""

from libkit.core.backup import BackupManager
from libkit.core.config import BACKUP_SUFFIX, KitConfig
from libkit.core.placeholders import (
    extract_project_name,
    extract_scope,
    is_valid_package_name,
    replace_placeholders,
)
from libkit.core.runner import CommandResult, CommandRunner, run_command
from libkit.core.update import update_rules
from libkit.core.values import TemplateValueCollector, TemplateValues, git_config

__all__ = [
    "BACKUP_SUFFIX",
    "BackupManager",
    "CommandResult",
    "CommandRunner",
    "KitConfig",
    "TemplateValueCollector",
    "TemplateValues",
    "extract_project_name",
    "extract_scope",
    "git_config",
    "is_valid_package_name",
    "replace_placeholders",
    "run_command",
    "update_rules",
]

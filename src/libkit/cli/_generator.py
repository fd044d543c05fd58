"""Orchestrates template rendering to files in the project directory."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from libkit.core.backup import BackupManager
from libkit.core.config import ENV_FILENAME, KitConfig
from libkit.core.placeholders import replace_placeholders
from libkit.core.runner import CommandRunner, run_command
from libkit.core.values import TemplateValueCollector, TemplateValues

log = logging.getLogger(__name__)

TEMPLATE_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("README.template.md", "README.md"),
    ("pyproject.template.toml", "pyproject.toml"),
    ("CONTRIBUTING.template.md", "CONTRIBUTING.md"),
    ("LICENSE.template", "LICENSE"),
)

ENV_TEMPLATE = "env.template"


def escape_env_value(value: str) -> str:
    """Escape *value* for a double-quoted ``.env`` entry."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


@dataclass
class GenerationReport:
    """Per-file outcome of one generation run."""

    created: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    backed_up: list[Path] = field(default_factory=list)
    installed: bool = False
    values: TemplateValues = field(default_factory=dict)


class ProjectGenerator:
    """
    Renders every template into the project directory.

    Each destination is backed up before it is overwritten. A failing file is
    logged and skipped; only a failure to create the backup directory aborts
    the run.
    """

    def __init__(
        self,
        config: KitConfig,
        collector: TemplateValueCollector | None = None,
        runner: CommandRunner = run_command,
        backups: BackupManager | None = None,
    ) -> None:
        self.config = config
        self.collector = collector
        self.runner = runner
        self.backups = backups or BackupManager(config)

    def mappings(self) -> list[tuple[Path, Path]]:
        tdir, pdir = self.config.templates_dir, self.config.project_dir
        return [(tdir / src, pdir / dest) for src, dest in TEMPLATE_MAPPINGS]

    def process_template(
        self,
        template: Path,
        dest: Path,
        values: TemplateValues,
        report: GenerationReport,
    ) -> bool:
        self.backups.ensure_backup_dir()

        if self.backups.backup(dest):
            report.backed_up.append(dest)

        try:
            content = template.read_text(encoding="utf-8")
            dest.write_text(replace_placeholders(content, values), encoding="utf-8")
        except OSError as e:
            log.error("❌ Error processing template %s -> %s: %s", template, dest, e)
            report.failed.append(dest)
            return False

        log.info("✅ Created %s", dest)
        report.created.append(dest)
        return True

    def process_env_template(self, values: TemplateValues, report: GenerationReport) -> bool:
        dest = self.config.project_dir / ENV_FILENAME
        if dest.exists():
            log.info("ℹ️ %s already exists, backing up and overwriting", dest)
        escaped = {k: escape_env_value(v) for k, v in values.items()}
        return self.process_template(
            self.config.templates_dir / ENV_TEMPLATE, dest, escaped, report
        )

    def run_install(self) -> bool:
        """Best-effort dependency install; failures are logged, never raised."""
        cmd = " ".join(self.config.install_command)
        log.info("📦 Running %s...", cmd)
        try:
            result = self.runner(self.config.install_command, cwd=self.config.project_dir)
        except OSError as e:
            log.error("❌ Error running %s: %s", cmd, e)
            return False

        if result.stdout.strip():
            log.debug("%s", result.stdout.strip())
        if not result.ok:
            log.error(
                "❌ %s exited with status %d: %s", cmd, result.returncode, result.stderr.strip()
            )
            return False

        log.info("✅ %s completed", cmd)
        return True

    def render(self, values: TemplateValues) -> GenerationReport:
        """Write every template with *values*, then the ``.env`` file, then install."""
        report = GenerationReport(values=values)
        for template, dest in self.mappings():
            self.process_template(template, dest, values, report)

        self.process_env_template(values, report)
        report.installed = self.run_install()
        return report

    def generate(
        self, on_values: Callable[[TemplateValues], None] | None = None
    ) -> GenerationReport:
        """Collect template values interactively and render the project.

        *on_values* sees the collected values before any file is written.
        """
        if self.collector is None:
            raise ValueError("generate() needs a TemplateValueCollector.")
        values = self.collector.collect()
        if on_values is not None:
            on_values(values)
        return self.render(values)

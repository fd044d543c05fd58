"""Gathering the values substituted into templates."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from libkit.core.placeholders import extract_project_name, extract_scope, is_valid_package_name
from libkit.core.runner import CommandRunner, run_command

log = logging.getLogger(__name__)

PACKAGE_NAME = "PACKAGE_NAME"
PACKAGE_SCOPE = "PACKAGE_SCOPE"
PACKAGE_VERSION = "PACKAGE_VERSION"
PACKAGE_AUTHOR_NAME = "PACKAGE_AUTHOR_NAME"
PACKAGE_AUTHOR_EMAIL = "PACKAGE_AUTHOR_EMAIL"
PACKAGE_DESCRIPTION = "PACKAGE_DESCRIPTION"
PACKAGE_GITHUB_USER = "PACKAGE_GITHUB_USER"
YEAR = "YEAR"
PROJECT_NAME = "PROJECT_NAME"

DEFAULT_PACKAGE_NAME = "@my-org/my-lib"
DEFAULT_VERSION = "0.0.1"
DEFAULT_DESCRIPTION = "A Python library"

TemplateValues = Mapping[str, str]
"""Read-only placeholder name -> value table for one generation run."""

PromptFn = Callable[[str, str], str]
"""``prompt(question, default) -> answer``; returns *default* on empty input or EOF."""


def git_config(key: str, runner: CommandRunner = run_command) -> str:
    """Read ``git config <key>``, or ``""`` when git is missing or the key is unset."""
    try:
        result = runner(["git", "config", key])
    except OSError as e:
        log.debug("git unavailable while reading %s: %s", key, e)
        return ""
    if not result.ok:
        return ""
    return result.stdout.strip()


class TemplateValueCollector:
    """
    Prompts for every template value, pre-filling defaults where one is derivable.

    Args:
        prompt: Interactive input capability.
        runner: Used to read the git identity for author defaults.
        today: Date source for ``YEAR``.
    """

    def __init__(
        self,
        prompt: PromptFn,
        runner: CommandRunner = run_command,
        today: Callable[[], datetime.date] = datetime.date.today,
    ) -> None:
        self.prompt = prompt
        self.runner = runner
        self.today = today

    def prompt_package_name(self) -> str:
        while True:
            name = self.prompt("Enter package name (format: @scope/name)", DEFAULT_PACKAGE_NAME)
            if is_valid_package_name(name):
                return name
            log.error(
                "❌ Invalid package name format. It must be in the format @scope/name "
                "(e.g., @my-org/example)"
            )

    def collect(self) -> TemplateValues:
        default_name = git_config("user.name", self.runner)
        default_email = git_config("user.email", self.runner)
        year = str(self.today().year)

        package_name = self.prompt_package_name()
        scope = extract_scope(package_name)

        values = {
            PACKAGE_NAME: package_name,
            PACKAGE_SCOPE: scope,
            PACKAGE_VERSION: self.prompt("Enter package version", DEFAULT_VERSION),
            PACKAGE_AUTHOR_NAME: self.prompt("Enter author name", default_name),
            PACKAGE_AUTHOR_EMAIL: self.prompt("Enter author email", default_email),
            PACKAGE_DESCRIPTION: self.prompt("Enter package description", DEFAULT_DESCRIPTION),
            PACKAGE_GITHUB_USER: self.prompt(
                "Enter GitHub username or organization", scope.removeprefix("@")
            ),
            YEAR: year,
            PROJECT_NAME: extract_project_name(package_name),
        }
        return MappingProxyType(values)

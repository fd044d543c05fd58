"""Enums for CLI commands."""

from enum import Enum


class Command(str, Enum):
    """Top-level kit commands."""

    GENERATE = "generate"
    RESET = "reset"
    UPDATE = "update"
    CLI = "cli"
    HELP = "help"

    @property
    def description(self) -> str:
        descriptions: dict[Command, str] = {
            Command.GENERATE: "Generate project files from templates",
            Command.RESET: "Restore files from backups",
            Command.UPDATE: "Update the editor rules folder from GitHub",
            Command.CLI: "Call a library method: cli <method> [--kebab-case options]",
            Command.HELP: "Display this help message",
        }
        return descriptions[self]

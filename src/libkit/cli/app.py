"""Typer CLI application for libkit."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from typer import Argument, Context, Exit, Option, Typer
from typer.core import TyperGroup

import libkit
from libkit.cli._args import parse_options
from libkit.cli._generator import ProjectGenerator
from libkit.cli._prompts import prompt_with_default
from libkit.cli._types import Command
from libkit.core.backup import BackupManager
from libkit.core.config import KitConfig
from libkit.core.update import update_rules
from libkit.core.values import PACKAGE_NAME, TemplateValueCollector, TemplateValues
from libkit.lib import CRUD_METHODS, Lib

_console = Console()


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("libkit")
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=_console,
        show_time=False,
        show_level=verbose,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _print_commands() -> None:
    _console.print()
    _console.print(f"[bold cyan]●[/]  libkit v{libkit.__version__}")
    _console.print("[dim]│[/]")
    _console.print(f"[dim]│[/]  {escape('Usage: libkit [OPTIONS] COMMAND [ARGS]...')}")
    _console.print("[dim]│[/]")
    for c in Command:
        _console.print(f"[dim]│[/]  [bold cyan]{c.value:<10}[/] {escape(c.description)}")
    _console.print("[dim]│[/]")
    _console.print("[dim]│[/]  If no command is provided, this help is displayed.")
    _console.print()


class KitGroup(TyperGroup):
    """Command group that answers an unknown command with the command listing."""

    def resolve_command(self, ctx, args):
        name = args[0] if args else ""
        unknown = name and not name.startswith("-") and self.get_command(ctx, name) is None
        if unknown and not ctx.resilient_parsing:
            _console.print(f"[bold red]❌ Unknown command:[/] {escape(name)}")
            _print_commands()
            raise Exit(code=1)
        return super().resolve_command(ctx, args)


app = Typer(
    cls=KitGroup,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"libkit v{libkit.__version__}")
        raise Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    project_dir: Annotated[
        Path | None,
        Option(
            "--project-dir",
            "-p",
            exists=True,
            file_okay=False,
            help="Directory to generate into. Defaults to cwd.",
        ),
    ] = None,
    backup_dir: Annotated[
        Path | None,
        Option("--backup-dir", "-b", help="Directory holding *.backup copies."),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Enable debug logging.")] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """libkit: scaffolding kit for new library projects."""
    _configure_logging(verbose)

    config = KitConfig.load(project_dir)
    if backup_dir is not None:
        config.backup_dir = backup_dir
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        _print_commands()


def _print_values(values: TemplateValues) -> None:
    table = Table(title="Using the following values", title_justify="left")
    table.add_column("Placeholder", style="bold cyan")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, escape(value))
    _console.print(table)


@app.command()
def generate(ctx: Context) -> None:
    """Generate project files from templates."""
    config: KitConfig = ctx.obj

    _console.print()
    _console.print(f"[bold cyan]●[/]  libkit v{libkit.__version__}: library template generator")
    _console.print("[dim]│[/]")

    collector = TemplateValueCollector(prompt_with_default)
    report = ProjectGenerator(config, collector).generate(on_values=_print_values)

    _console.print("[dim]│[/]")
    for path in report.created:
        _console.print(f"[dim]│[/]  [green]✓[/] {escape(str(path))}")
    for path in report.failed:
        _console.print(f"[dim]│[/]  [red]✗[/] {escape(str(path))}")
    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done! Your library is ready to use.")
    _console.print(f"[dim]│[/]  Package: {escape(report.values[PACKAGE_NAME])}")
    _console.print()


@app.command()
def reset(ctx: Context) -> None:
    """Restore files from backups and remove the consumed backups."""
    config: KitConfig = ctx.obj
    restored = BackupManager(config).restore_all()
    _console.print(f"[bold cyan]●[/]  Done! {restored} file(s) restored.")


@app.command()
def update(ctx: Context) -> None:
    """Update the editor rules folder from GitHub."""
    config: KitConfig = ctx.obj
    if update_rules(config):
        _console.print("[bold cyan]●[/]  Done! Editor rules updated.")


@app.command("help")
def help_() -> None:
    """Display the available commands."""
    _print_commands()


@app.command(
    "cli",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def lib_cli(
    ctx: Context,
    method: Annotated[
        str | None, Argument(help="Library method: create, read, update or destroy.")
    ] = None,
) -> None:
    """Call a library method with --kebab-case options and print the JSON result."""
    if method is None:
        _console.print(f"libkit v{libkit.__version__} - library methods:")
        for name in CRUD_METHODS:
            _console.print(f"  - {name}")
        _console.print("\nRun with a method, e.g. libkit cli read --first-name John", markup=False)
        return

    if method not in CRUD_METHODS:
        _console.print(f"[bold red]Error:[/] Unknown method {escape(method)!r}.")
        _console.print(f"[dim]Valid values:[/] {', '.join(CRUD_METHODS)}")
        raise Exit(code=1)

    lib = Lib(ctx.obj.env if ctx.obj is not None else None)
    result = lib.call(method, parse_options(ctx.args))
    _console.print_json(json.dumps(result))


def run() -> None:
    """Console-script entry point; uncaught errors exit with status 1."""
    try:
        app()
    except Exception as e:  # noqa: BLE001
        _console.print(f"[bold red]❌ Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

"""Clack-style line prompts using Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_console = Console()


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def prompt_with_default(question: str, default: str) -> str:
    """Ask *question* and read one line; empty input or a closed stdin yields *default*."""
    shown = f" [dim]({escape(default)})[/]" if default else ""
    _console.print(f"[bold cyan]◆[/]  {question}{shown}")
    _console.print("[dim]│[/]  ", end="")

    try:
        answer = input().strip()
    except EOFError:
        _console.print()
        answer = ""

    result = answer or default

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(result)}")
    _print_bar()

    return result

"""Command-line interface for libkit."""

from libkit.cli.app import app, run

__all__ = ["app", "run"]

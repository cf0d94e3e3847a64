"""Command-line interface for variantbox using Typer."""

from variantbox.cli.app import app, main
from variantbox.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]

"""CLI command modules."""

import typer

from variantbox.cli.commands.config import register_commands as register_config_commands
from variantbox.cli.commands.resolve import (
    register_commands as register_resolve_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_resolve_commands(app)
    register_config_commands(app)

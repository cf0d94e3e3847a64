"""Configuration commands."""

import json
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from variantbox.cli.app import AppContext
from variantbox.cli.decorators import handle_errors
from variantbox.cli.helpers.output import Colors


config_app = typer.Typer(
    name="config",
    help="Inspect user configuration",
    no_args_is_help=True,
)


def _flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    rows: list[tuple[str, Any]] = []
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            rows.extend(_flatten(value, prefix=f"{full_key}."))
        else:
            rows.append((full_key, value))
    return rows


@config_app.command(name="show")
@handle_errors
def show_config(
    ctx: typer.Context,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Show the effective user configuration."""
    app_context: AppContext = ctx.obj
    user_config = app_context.user_config
    data = user_config.to_dict()

    if output_format == "json":
        typer.echo(json.dumps(data, indent=2))
        return

    source = str(user_config.config_path) if user_config.config_path else "defaults"
    table = Table(title=f"Configuration ({source})", title_style=Colors.HEADER)
    table.add_column("Setting", style=Colors.PRIMARY, no_wrap=True)
    table.add_column("Value")
    for key, value in _flatten(data):
        table.add_row(key, "-" if value is None else str(value))
    Console().print(table)


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main app."""
    app.add_typer(config_app, name="config")

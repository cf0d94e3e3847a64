"""Descriptor commands (resolve, variants)."""

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from variantbox.cli.app import AppContext
from variantbox.cli.decorators import handle_errors
from variantbox.cli.helpers import (
    print_build_resolution,
    print_error_message,
)
from variantbox.cli.helpers.output import Colors
from variantbox.config.descriptor_loader import load_descriptor
from variantbox.config.models.platform import PlatformValues
from variantbox.config.platform import load_pubspec_platform_values
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.signing import SigningIdentity
from variantbox.resolution.build_resolver import create_build_resolver


logger = get_struct_logger(__name__)


def _collect_platform_values(
    app_context: AppContext,
    pubspec: Path | None,
    target_sdk: int | None,
    compile_sdk: int | None,
    version_code: int | None,
    version_name: str | None,
) -> PlatformValues:
    """Command line values win over pubspec values, which win over user config."""
    platform = PlatformValues(
        target_sdk=target_sdk,
        compile_sdk=compile_sdk,
        version_code=version_code,
        version_name=version_name,
    )
    if pubspec is not None:
        platform = platform.merged_with(load_pubspec_platform_values(pubspec))
    return platform.merged_with(app_context.user_config.config.platform)


@handle_errors
def resolve(
    ctx: typer.Context,
    descriptor: Annotated[Path, typer.Argument(help="Build descriptor YAML file")],
    pubspec: Annotated[
        Path | None,
        typer.Option("--pubspec", help="Flutter pubspec.yaml providing version values"),
    ] = None,
    target_sdk: Annotated[
        int | None, typer.Option("--target-sdk", help="Platform target SDK")
    ] = None,
    compile_sdk: Annotated[
        int | None, typer.Option("--compile-sdk", help="Platform compile SDK")
    ] = None,
    version_code: Annotated[
        int | None, typer.Option("--version-code", help="Platform version code")
    ] = None,
    version_name: Annotated[
        str | None, typer.Option("--version-name", help="Platform version name")
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = None,
    reveal_secrets: Annotated[
        bool,
        typer.Option(
            "--reveal-secrets",
            help="Include store and key passwords in JSON output",
        ),
    ] = False,
) -> None:
    """Resolve every variant of a build descriptor.

    Exits with status 1 and prints one line per failure when any variant
    or the manifest cannot be resolved.
    """
    app_context: AppContext = ctx.obj
    user_config = app_context.user_config.config

    fmt = output_format or user_config.output_format
    if fmt not in ("text", "json"):
        print_error_message(f"Unknown output format '{fmt}' (expected text or json)")
        raise typer.Exit(2)

    platform = _collect_platform_values(
        app_context, pubspec, target_sdk, compile_sdk, version_code, version_name
    )
    build_descriptor = load_descriptor(descriptor, environ=os.environ)

    resolver = create_build_resolver(
        debug_keystore_path=user_config.debug_keystore_path
    )
    result = resolver.resolve(build_descriptor, platform)

    if fmt == "json":
        typer.echo(result.to_json(reveal_secrets=reveal_secrets))
        if not result.success:
            for line in result.error_lines():
                print_error_message(line)
    else:
        if reveal_secrets:
            logger.warning("reveal_secrets_ignored", output_format=fmt)
        print_build_resolution(result)

    if not result.success:
        raise typer.Exit(1)


def _signing_source(signing: SigningIdentity | str | None) -> str:
    if signing is None:
        return "defaults"
    if isinstance(signing, str):
        return f"config: {signing}"
    return "inline"


@handle_errors
def variants(
    descriptor: Annotated[Path, typer.Argument(help="Build descriptor YAML file")],
) -> None:
    """List declared variants without resolving them."""
    build_descriptor = load_descriptor(descriptor, environ=os.environ)

    table = Table(
        title=f"Variants of {build_descriptor.application_id}",
        title_style=Colors.HEADER,
    )
    table.add_column("Variant", style=Colors.PRIMARY, no_wrap=True)
    table.add_column("Signing")
    table.add_column("Minify")
    table.add_column("Rule files")

    for name, partial in build_descriptor.variants:
        if partial.minify_enabled is None:
            minify = "default"
        else:
            minify = "yes" if partial.minify_enabled else "no"
        rule_files = (
            "default"
            if partial.shrink_rule_files is None
            else ", ".join(partial.shrink_rule_files) or "-"
        )
        table.add_row(str(name), _signing_source(partial.signing), minify, rule_files)

    Console().print(table)


def register_commands(app: typer.Typer) -> None:
    """Register descriptor commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="resolve")(resolve)
    app.command(name="variants")(variants)

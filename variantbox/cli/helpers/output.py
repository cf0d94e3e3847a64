"""Helper functions for CLI output formatting with Rich integration."""

from typing import Any

from rich.console import Console
from rich.table import Table

from variantbox.models.manifest import ResolvedManifestMetadata
from variantbox.models.results import BuildResolution
from variantbox.models.variant import VariantConfig


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    HEADER = "bold cyan"
    PRIMARY = "cyan"


class Icons:
    """Standardized icons for different message types."""

    CHECKMARK = "✓"
    CROSS = "✗"


def print_success_message(message: str) -> None:
    """Print a success message with a checkmark."""
    Console().print(f"{Icons.CHECKMARK} {message}", style=Colors.SUCCESS, soft_wrap=True)


def print_error_message(message: str) -> None:
    """Print an error message with an X symbol on stderr."""
    Console(stderr=True).print(
        f"{Icons.CROSS} {message}", style=Colors.ERROR, soft_wrap=True, markup=False
    )


def describe_signing(variant: VariantConfig) -> str:
    """Short human description of where a variant's signing comes from.

    Never includes passwords.
    """
    identity = variant.signing_identity
    if identity is None:
        return "unsigned"
    if variant.signing_config:
        return f"{variant.signing_config} ({identity.key_alias})"
    return f"inline ({identity.key_alias})"


def build_manifest_table(manifest: ResolvedManifestMetadata) -> Table:
    table = Table(title="Manifest", show_header=False, title_style=Colors.HEADER)
    table.add_column("Field", style=Colors.PRIMARY)
    table.add_column("Value")
    rows: list[tuple[str, Any]] = [
        ("applicationId", manifest.application_id),
        ("namespace", manifest.namespace),
        ("minSdk", manifest.min_sdk),
        ("targetSdk", manifest.target_sdk),
        ("compileSdk", manifest.compile_sdk),
        ("versionCode", manifest.version_code),
        ("versionName", manifest.version_name),
        ("ndkVersion", manifest.ndk_version),
    ]
    for field, value in rows:
        if value is not None:
            table.add_row(field, str(value))
    return table


def build_variants_table(variants: dict[str, VariantConfig]) -> Table:
    table = Table(title="Variants", title_style=Colors.HEADER)
    table.add_column("Variant", style=Colors.PRIMARY, no_wrap=True)
    table.add_column("Signing")
    table.add_column("Minify")
    table.add_column("Rule files")
    table.add_column("Debuggable")
    for name, variant in variants.items():
        table.add_row(
            name,
            describe_signing(variant),
            "yes" if variant.minify_enabled else "no",
            ", ".join(variant.shrink_rule_files) or "-",
            "yes" if variant.debuggable else "no",
        )
    return table


def print_build_resolution(result: BuildResolution) -> None:
    """Print a resolution result as Rich tables followed by error lines."""
    console = Console()
    if result.manifest is not None:
        console.print(build_manifest_table(result.manifest))
    if result.variants.variants:
        console.print(build_variants_table(result.variants.variants))

    for line in result.error_lines():
        print_error_message(line)

    if result.success:
        print_success_message(
            f"Resolved {len(result.variants.variants)} variant(s)"
        )

"""Helpers for CLI commands."""

from variantbox.cli.helpers.output import (
    describe_signing,
    print_build_resolution,
    print_error_message,
    print_success_message,
)


__all__ = [
    "describe_signing",
    "print_build_resolution",
    "print_error_message",
    "print_success_message",
]

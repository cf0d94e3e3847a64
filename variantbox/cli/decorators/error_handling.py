"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from variantbox.core.errors import ConfigError, VariantboxError
from variantbox.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    This decorator catches common exceptions and provides appropriate
    error messages to the user before exiting with a non-zero status code.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except VariantboxError as e:
            logger.error("variantbox_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)

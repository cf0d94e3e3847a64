"""Main CLI application for variantbox."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from variantbox.cli.decorators.error_handling import print_stack_trace_if_verbose
from variantbox.config.user_config import UserConfig, create_user_config
from variantbox.core.logging import setup_logging
from variantbox.core.structlog_logger import get_struct_logger


__all__ = ["app", "main", "__version__", "AppContext"]


__version__ = distribution("variantbox").version

logger = get_struct_logger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.user_config: UserConfig = create_user_config(cli_config_path=config_file)


app = typer.Typer(
    name="variantbox",
    help=f"""variantbox build-variant resolver v{__version__}

Turns a declarative mobile packaging descriptor (application ID, SDK
versions, signing configs, shrinking options) into fully resolved
per-variant build configurations.

Common workflows:
  • Resolve variants:  variantbox resolve build.yaml --pubspec pubspec.yaml --target-sdk 34
  • List variants:     variantbox variants build.yaml
  • Show config:       variantbox config show""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Render console logs as JSON lines"),
    ] = False,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """variantbox build-variant resolver."""
    if version:
        print(f"variantbox v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        verbose=verbose, log_file=log_file, config_file=config_file
    )
    ctx.obj = app_context

    # Set log level based on verbosity, debug flag, or config
    log_level = logging.WARNING
    if debug:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    elif verbose >= 2:
        log_level = logging.DEBUG
    else:
        log_level = app_context.user_config.get_log_level_int()

    setup_logging(level=log_level, log_file=log_file, json_logs=json_logs)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

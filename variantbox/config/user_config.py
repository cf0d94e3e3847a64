"""
User configuration management for variantbox.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from variantbox.config.models import UserConfigData
from variantbox.core.errors import ConfigError
from variantbox.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

# Environment variable prefix
ENV_PREFIX = "VARIANTBOX_"


class UserConfig:
    """Manages user-specific configuration for variantbox."""

    def __init__(self, cli_config_path: str | Path | None = None):
        """Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
        """
        self._main_config_path: Path | None = None
        self._config_paths = self._generate_config_paths(cli_config_path)
        self._load_config()

    def _generate_config_paths(self, cli_config_path: str | Path | None) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if cli_config_path:
            config_paths.append(Path(cli_config_path).expanduser().resolve())

        config_paths.extend(
            [Path.cwd() / "variantbox.yaml", Path.cwd() / ".variantbox.yml"]
        )

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_dir = (
            Path(xdg_config_home) / "variantbox"
            if xdg_config_home
            else Path.home() / ".config" / "variantbox"
        )
        config_paths.extend([config_dir / "config.yaml", config_dir / "config.yml"])

        return config_paths

    def _read_config_file(self, config_path: Path) -> dict[str, Any]:
        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        return data

    def _load_config(self) -> None:
        """Load configuration from the first config file found and the environment."""
        logger.debug(
            "config_search",
            paths=[str(p) for p in self._config_paths],
            env_vars=sorted(k for k in os.environ if k.startswith(ENV_PREFIX)),
        )

        config_data: dict[str, Any] = {}
        for config_path in self._config_paths:
            if config_path.is_file():
                config_data = self._read_config_file(config_path)
                self._main_config_path = config_path
                logger.debug("user_config_loaded", path=str(config_path))
                break
        else:
            logger.debug("user_config_defaults")

        try:
            self._config = UserConfigData(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid user configuration: {e}") from e

    @property
    def config(self) -> UserConfigData:
        return self._config

    @property
    def config_path(self) -> Path | None:
        """Config file the values were loaded from, if any."""
        return self._main_config_path

    def get_log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        return getattr(logging, self._config.log_level, logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        return self._config.model_dump(mode="json")


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create user configuration instance.

    Args:
        cli_config_path: Optional config file path provided via CLI

    Returns:
        UserConfig: Loaded user configuration
    """
    return UserConfig(cli_config_path=cli_config_path)

"""User configuration models."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from variantbox.config.models.platform import PlatformValues


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (highest)
    2. Constructor arguments (file data)
    3. .env file
    4. Default values (lowest)
    """

    model_config = SettingsConfigDict(
        env_prefix="VARIANTBOX_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    # Logging
    log_level: str = "WARNING"

    # Output
    output_format: Literal["text", "json"] = Field(
        default="text", description="Default output format for resolve results"
    )

    debug_keystore_path: str = Field(
        default="~/.android/debug.keystore",
        description="Debug keystore used when a descriptor declares no 'debug' signing config",
    )

    platform: PlatformValues = Field(
        default_factory=PlatformValues,
        description="Fallback platform values when none are given on the command line",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

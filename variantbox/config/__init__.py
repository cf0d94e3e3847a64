"""Configuration loading for variantbox."""

from variantbox.config.descriptor_loader import load_descriptor, parse_descriptor
from variantbox.config.models import PlatformValues, UserConfigData
from variantbox.config.platform import (
    load_pubspec_platform_values,
    parse_flutter_version,
)
from variantbox.config.user_config import UserConfig, create_user_config


__all__ = [
    "PlatformValues",
    "UserConfig",
    "UserConfigData",
    "create_user_config",
    "load_descriptor",
    "load_pubspec_platform_values",
    "parse_descriptor",
    "parse_flutter_version",
]

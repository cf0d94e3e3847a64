from .errors import (
    ConfigError,
    DescriptorError,
    DuplicateVariantError,
    IncompleteSigningIdentityError,
    InvalidSdkRangeError,
    InvalidVariantConfigError,
    InvalidVariantNameError,
    MissingSigningIdentityError,
    PlatformValueError,
    UnknownSigningConfigError,
    VariantboxError,
    VariantError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "VariantboxError",
    "ConfigError",
    "DescriptorError",
    "PlatformValueError",
    "InvalidSdkRangeError",
    "VariantError",
    "DuplicateVariantError",
    "InvalidVariantConfigError",
    "InvalidVariantNameError",
    "MissingSigningIdentityError",
    "UnknownSigningConfigError",
    "IncompleteSigningIdentityError",
]

"""Configuration models for variantbox."""

from variantbox.config.models.platform import PlatformValues
from variantbox.config.models.user import UserConfigData


__all__ = ["PlatformValues", "UserConfigData"]

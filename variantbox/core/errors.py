"""Error taxonomy for variantbox.

All errors raised by the library derive from :class:`VariantboxError`. Errors
tied to a single declared variant derive from :class:`VariantError` and carry
the variant name so that callers can report one line per failed variant.

Error messages never include secret values (store or key passwords).
"""


class VariantboxError(Exception):
    """Base exception for all variantbox errors."""


class ConfigError(VariantboxError):
    """Error loading or validating configuration."""


class DescriptorError(ConfigError):
    """Build descriptor could not be read or is malformed."""


class PlatformValueError(ConfigError):
    """A platform-provided value is missing or malformed."""


class InvalidSdkRangeError(VariantboxError):
    """Minimum SDK is greater than the target SDK."""

    def __init__(self, min_sdk: int, target_sdk: int) -> None:
        self.min_sdk = min_sdk
        self.target_sdk = target_sdk
        super().__init__(
            f"minSdk ({min_sdk}) must not be greater than targetSdk ({target_sdk})"
        )


class VariantError(VariantboxError):
    """Error resolving a single build variant."""

    def __init__(self, variant: str, message: str) -> None:
        self.variant = variant
        super().__init__(message)


class DuplicateVariantError(VariantError):
    """The same variant name was declared more than once."""

    def __init__(self, variant: str, count: int = 2) -> None:
        self.count = count
        super().__init__(
            variant, f"Variant '{variant}' is declared {count} times"
        )


class InvalidVariantNameError(VariantError):
    """A variant name is empty or not a string."""

    def __init__(self, variant: object) -> None:
        super().__init__(
            str(variant), f"Invalid variant name {variant!r}: must be a non-empty string"
        )


class MissingSigningIdentityError(VariantError):
    """A release-style variant has no signing identity available."""

    def __init__(self, variant: str) -> None:
        super().__init__(
            variant,
            f"Variant '{variant}' requires a signing identity but neither the "
            "variant nor the defaults provide one",
        )


class UnknownSigningConfigError(VariantError):
    """A variant references a signing config that was never declared."""

    def __init__(self, variant: str, signing_config: str) -> None:
        self.signing_config = signing_config
        super().__init__(
            variant,
            f"Variant '{variant}' references unknown signing config '{signing_config}'",
        )


class InvalidVariantConfigError(VariantError):
    """A declared variant has settings of the wrong type or unknown keys."""

    def __init__(self, variant: str, details: str) -> None:
        self.details = details
        super().__init__(
            variant, f"Variant '{variant}' has invalid settings: {details}"
        )


class IncompleteSigningIdentityError(VariantError):
    """A signing identity used for signing has empty fields."""

    def __init__(self, variant: str, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(
            variant,
            f"Variant '{variant}' signing identity is missing: "
            f"{', '.join(missing_fields)}",
        )


__all__ = [
    "ConfigError",
    "DescriptorError",
    "DuplicateVariantError",
    "IncompleteSigningIdentityError",
    "InvalidSdkRangeError",
    "InvalidVariantConfigError",
    "InvalidVariantNameError",
    "MissingSigningIdentityError",
    "PlatformValueError",
    "UnknownSigningConfigError",
    "VariantError",
    "VariantboxError",
]

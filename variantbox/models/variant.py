"""Build variant models."""

from pydantic import ConfigDict, Field, field_validator

from variantbox.models.base import VariantboxBaseModel
from variantbox.models.signing import SigningIdentity


class PartialVariantConfig(VariantboxBaseModel):
    """Variant as declared in a descriptor; every field is optional.

    ``signing`` is either an inline identity or the name of a declared
    signing config. ``None`` means "not declared, use the default".
    """

    # Unknown keys (typos such as ``minifyEnable``) are rejected
    model_config = ConfigDict(extra="forbid")

    signing: SigningIdentity | str | None = None
    minify_enabled: bool | None = Field(default=None, alias="minifyEnabled")
    shrink_rule_files: list[str] | None = Field(default=None, alias="shrinkRuleFiles")
    debuggable: bool | None = None

    @field_validator("shrink_rule_files", mode="before")
    @classmethod
    def coerce_rule_files(cls, v: object) -> object:
        """Accept a single path as a one-element list."""
        if isinstance(v, str):
            return [v]
        return v


class VariantConfig(VariantboxBaseModel):
    """Fully resolved build variant.

    Immutable once created; consumed once by the packaging step building
    this variant.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    signing_identity: SigningIdentity | None = Field(
        default=None, alias="signingIdentity"
    )
    signing_config: str | None = Field(default=None, alias="signingConfig")
    minify_enabled: bool = Field(default=False, alias="minifyEnabled")
    shrink_rule_files: tuple[str, ...] = Field(default=(), alias="shrinkRuleFiles")
    debuggable: bool = False

    @property
    def requires_signing(self) -> bool:
        """Release-style variants (not debuggable) must be signed."""
        return not self.debuggable

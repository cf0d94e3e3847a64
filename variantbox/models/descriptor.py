"""Build descriptor model (the declarative packaging file)."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from variantbox.models.base import VariantboxBaseModel
from variantbox.models.signing import SigningIdentity
from variantbox.models.variant import PartialVariantConfig


class BuildDescriptor(VariantboxBaseModel):
    """Declarative packaging descriptor as written by the app developer.

    Values the app framework supplies (target/compile SDK, version code and
    name) may be omitted and are filled from platform values at resolution
    time.

    ``variants`` keeps declaration order as ``(name, config)`` pairs so that
    duplicate names survive loading and are rejected by the resolver.
    """

    application_id: str = Field(alias="applicationId")
    namespace: str | None = None
    min_sdk: int = Field(alias="minSdk")
    target_sdk: int | None = Field(default=None, alias="targetSdk")
    compile_sdk: int | None = Field(default=None, alias="compileSdk")
    version_code: int | None = Field(default=None, alias="versionCode")
    version_name: str | None = Field(default=None, alias="versionName")
    ndk_version: str | None = Field(default=None, alias="ndkVersion")

    defaults: PartialVariantConfig = Field(default_factory=PartialVariantConfig)
    signing_configs: dict[str, SigningIdentity] = Field(
        default_factory=dict, alias="signingConfigs"
    )
    variants: list[tuple[Any, PartialVariantConfig]] = Field(default_factory=list)

    @field_validator("variants", mode="before")
    @classmethod
    def variants_as_pairs(cls, v: Any) -> Any:
        """Accept a plain mapping as well as a list of pairs."""
        if v is None:
            return []
        if isinstance(v, Mapping):
            return [
                (name, config if config is not None else {})
                for name, config in v.items()
            ]
        if isinstance(v, list):
            return [
                (entry[0], entry[1] if entry[1] is not None else {})
                if isinstance(entry, tuple | list) and len(entry) == 2
                else entry
                for entry in v
            ]
        return v

    @field_validator("defaults", mode="before")
    @classmethod
    def defaults_not_null(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("ndk_version", "version_name", mode="before")
    @classmethod
    def numbers_as_strings(cls, v: Any) -> Any:
        """YAML reads ``versionName: 1.0`` as a float."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v

    def variant_names(self) -> list[Any]:
        """Declared variant names in declaration order (may repeat)."""
        return [name for name, _ in self.variants]

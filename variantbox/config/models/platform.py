"""Platform-provided values model."""

from typing import Any

from pydantic import Field, field_validator

from variantbox.models.base import VariantboxBaseModel


class PlatformValues(VariantboxBaseModel):
    """SDK and version numbers supplied by the app framework.

    These are passed to the resolver explicitly instead of being read from
    the environment, so resolution stays a pure function of its inputs.
    """

    compile_sdk: int | None = Field(default=None, alias="compileSdk")
    target_sdk: int | None = Field(default=None, alias="targetSdk")
    version_code: int | None = Field(default=None, alias="versionCode")
    version_name: str | None = Field(default=None, alias="versionName")

    @field_validator("version_name", mode="before")
    @classmethod
    def version_name_as_string(cls, v: Any) -> Any:
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v

    def merged_with(self, fallback: "PlatformValues") -> "PlatformValues":
        """Return values from ``self``, using ``fallback`` where unset."""
        merged = fallback.model_dump()
        merged.update(
            {key: value for key, value in self.model_dump().items() if value is not None}
        )
        return PlatformValues(**merged)

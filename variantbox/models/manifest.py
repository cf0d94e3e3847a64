"""Manifest metadata model."""

from pydantic import ConfigDict, Field

from variantbox.models.base import VariantboxBaseModel


class ResolvedManifestMetadata(VariantboxBaseModel):
    """Application identity and SDK/version numbers for the package manifest.

    ``min_sdk <= target_sdk`` is enforced by the manifest resolver, which
    raises ``InvalidSdkRangeError`` rather than a validation error.
    """

    model_config = ConfigDict(frozen=True)

    application_id: str = Field(alias="applicationId", min_length=1)
    namespace: str = Field(min_length=1)
    min_sdk: int = Field(alias="minSdk", gt=0)
    target_sdk: int = Field(alias="targetSdk", gt=0)
    compile_sdk: int | None = Field(default=None, alias="compileSdk", gt=0)
    version_code: int = Field(alias="versionCode", gt=0)
    version_name: str = Field(alias="versionName", min_length=1)
    ndk_version: str | None = Field(default=None, alias="ndkVersion")

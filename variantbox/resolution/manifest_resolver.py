"""Manifest metadata resolver."""

from typing import Any

from pydantic import ValidationError

from variantbox.config.models.platform import PlatformValues
from variantbox.core.errors import (
    DescriptorError,
    InvalidSdkRangeError,
    PlatformValueError,
)
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.base import validation_error_details
from variantbox.models.descriptor import BuildDescriptor
from variantbox.models.manifest import ResolvedManifestMetadata


logger = get_struct_logger(__name__)


class ManifestResolver:
    """Resolve manifest metadata from a descriptor and platform values.

    Values written in the descriptor win over platform values.
    """

    def resolve(
        self, descriptor: BuildDescriptor, platform: PlatformValues | None = None
    ) -> ResolvedManifestMetadata:
        """Build the manifest metadata.

        Args:
            descriptor: Loaded build descriptor
            platform: Framework-provided SDK and version values

        Returns:
            ResolvedManifestMetadata: Complete manifest metadata

        Raises:
            PlatformValueError: If a required value is provided by neither source
            InvalidSdkRangeError: If minSdk is greater than targetSdk
            DescriptorError: If a value is out of range
        """
        platform = platform or PlatformValues()

        target_sdk = self._pick("targetSdk", descriptor.target_sdk, platform.target_sdk)
        version_code = self._pick(
            "versionCode", descriptor.version_code, platform.version_code
        )
        version_name = self._pick(
            "versionName", descriptor.version_name, platform.version_name
        )
        compile_sdk = (
            descriptor.compile_sdk
            if descriptor.compile_sdk is not None
            else platform.compile_sdk
        )

        if descriptor.min_sdk > target_sdk:
            raise InvalidSdkRangeError(descriptor.min_sdk, target_sdk)

        if compile_sdk is not None and target_sdk > compile_sdk:
            logger.warning(
                "target_sdk_above_compile_sdk",
                target_sdk=target_sdk,
                compile_sdk=compile_sdk,
            )

        try:
            manifest = ResolvedManifestMetadata(
                application_id=descriptor.application_id,
                namespace=descriptor.namespace or descriptor.application_id,
                min_sdk=descriptor.min_sdk,
                target_sdk=target_sdk,
                compile_sdk=compile_sdk,
                version_code=version_code,
                version_name=version_name,
                ndk_version=descriptor.ndk_version,
            )
        except ValidationError as e:
            raise DescriptorError(
                f"Invalid manifest values: {validation_error_details(e)}"
            ) from e

        logger.debug(
            "manifest_resolved",
            application_id=manifest.application_id,
            min_sdk=manifest.min_sdk,
            target_sdk=manifest.target_sdk,
            version_code=manifest.version_code,
        )
        return manifest

    def _pick(self, field: str, declared: Any, provided: Any) -> Any:
        value = declared if declared is not None else provided
        if value is None:
            raise PlatformValueError(
                f"{field} is not set in the descriptor and no platform value was given"
            )
        return value


def create_manifest_resolver() -> ManifestResolver:
    """Create manifest resolver instance."""
    return ManifestResolver()

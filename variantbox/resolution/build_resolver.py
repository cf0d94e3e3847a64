"""Resolve a complete build descriptor."""

from variantbox.config.models.platform import PlatformValues
from variantbox.core.errors import VariantboxError
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.descriptor import BuildDescriptor
from variantbox.models.results import BuildResolution
from variantbox.models.signing import debug_signing_identity
from variantbox.resolution.manifest_resolver import (
    ManifestResolver,
    create_manifest_resolver,
)
from variantbox.resolution.variant_resolver import (
    DEBUG_VARIANT,
    VariantResolver,
    create_variant_resolver,
)


logger = get_struct_logger(__name__)

DEFAULT_DEBUG_KEYSTORE = "~/.android/debug.keystore"


class BuildResolver:
    """Resolve manifest metadata and every variant of a descriptor.

    A manifest failure is reported in the result and does not stop
    variant resolution.
    """

    def __init__(
        self,
        variant_resolver: VariantResolver,
        manifest_resolver: ManifestResolver,
        debug_keystore_path: str = DEFAULT_DEBUG_KEYSTORE,
    ) -> None:
        self.variant_resolver = variant_resolver
        self.manifest_resolver = manifest_resolver
        self.debug_keystore_path = debug_keystore_path

    def resolve(
        self, descriptor: BuildDescriptor, platform: PlatformValues | None = None
    ) -> BuildResolution:
        """Resolve a descriptor.

        Args:
            descriptor: Loaded build descriptor
            platform: Framework-provided values

        Returns:
            BuildResolution: Manifest, variants and all collected errors

        Raises:
            DescriptorError: If the descriptor defaults are unusable
        """
        result = BuildResolution()

        try:
            result.manifest = self.manifest_resolver.resolve(descriptor, platform)
        except VariantboxError as e:
            logger.warning(
                "manifest_resolution_failed",
                error_type=type(e).__name__,
                error=str(e),
            )
            result.manifest_error = e

        signing_configs = dict(descriptor.signing_configs)
        if DEBUG_VARIANT not in signing_configs:
            signing_configs[DEBUG_VARIANT] = debug_signing_identity(
                self.debug_keystore_path
            )

        defaults = self.variant_resolver.build_defaults(
            descriptor.defaults, signing_configs
        )
        result.variants = self.variant_resolver.resolve(
            descriptor.variants, defaults, signing_configs
        )

        logger.info(
            "build_resolved",
            application_id=descriptor.application_id,
            success=result.success,
            variants=len(result.variants.variants),
            errors=len(result.error_lines()),
        )
        return result


def create_build_resolver(
    debug_keystore_path: str = DEFAULT_DEBUG_KEYSTORE,
) -> BuildResolver:
    """Create build resolver with default collaborators."""
    return BuildResolver(
        variant_resolver=create_variant_resolver(),
        manifest_resolver=create_manifest_resolver(),
        debug_keystore_path=debug_keystore_path,
    )

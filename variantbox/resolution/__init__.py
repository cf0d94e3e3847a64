"""Descriptor, manifest and variant resolution."""

from variantbox.resolution.build_resolver import (
    BuildResolver,
    create_build_resolver,
)
from variantbox.resolution.manifest_resolver import (
    ManifestResolver,
    create_manifest_resolver,
)
from variantbox.resolution.variant_resolver import (
    VariantResolver,
    create_variant_resolver,
)


__all__: list[str] = [
    # Resolvers
    "BuildResolver",
    "ManifestResolver",
    "VariantResolver",
    # Factory functions
    "create_build_resolver",
    "create_manifest_resolver",
    "create_variant_resolver",
]

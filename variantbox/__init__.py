"""variantbox - build-variant configuration resolver for mobile packaging."""

from importlib.metadata import distribution

from .config import PlatformValues, load_descriptor, parse_descriptor
from .models import (
    BuildDescriptor,
    BuildResolution,
    PartialVariantConfig,
    ResolvedManifestMetadata,
    SigningIdentity,
    VariantConfig,
    VariantResolution,
)
from .resolution import (
    create_build_resolver,
    create_manifest_resolver,
    create_variant_resolver,
)


__version__ = distribution(__package__ or "variantbox").version

__all__ = [
    "BuildDescriptor",
    "BuildResolution",
    "PartialVariantConfig",
    "PlatformValues",
    "ResolvedManifestMetadata",
    "SigningIdentity",
    "VariantConfig",
    "VariantResolution",
    "__version__",
    "create_build_resolver",
    "create_manifest_resolver",
    "create_variant_resolver",
    "load_descriptor",
    "parse_descriptor",
]

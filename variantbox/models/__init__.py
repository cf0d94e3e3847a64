"""Data models for variantbox."""

from variantbox.models.base import VariantboxBaseModel
from variantbox.models.descriptor import BuildDescriptor
from variantbox.models.manifest import ResolvedManifestMetadata
from variantbox.models.results import BuildResolution, VariantResolution
from variantbox.models.signing import SigningIdentity, debug_signing_identity
from variantbox.models.variant import PartialVariantConfig, VariantConfig


__all__ = [
    "BuildDescriptor",
    "BuildResolution",
    "PartialVariantConfig",
    "ResolvedManifestMetadata",
    "SigningIdentity",
    "VariantConfig",
    "VariantResolution",
    "VariantboxBaseModel",
    "debug_signing_identity",
]

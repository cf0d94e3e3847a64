"""Resolution result models."""

import json
from dataclasses import dataclass, field
from typing import Any

from variantbox.core.errors import VariantboxError, VariantError
from variantbox.models.manifest import ResolvedManifestMetadata
from variantbox.models.variant import VariantConfig


@dataclass
class VariantResolution:
    """Outcome of resolving a set of declared variants.

    Successful variants and per-variant failures are reported side by side;
    one variant failing never removes another from ``variants``.
    """

    variants: dict[str, VariantConfig] = field(default_factory=dict)
    errors: list[VariantError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def error_lines(self) -> list[str]:
        """One line per failed variant, free of secret values."""
        return [f"{error.variant}: {error}" for error in self.errors]

    def to_dict(self, reveal_secrets: bool = False) -> dict[str, Any]:
        return {
            "variants": {
                name: variant.to_dict(reveal_secrets=reveal_secrets)
                for name, variant in self.variants.items()
            },
            "errors": self.error_lines(),
        }


@dataclass
class BuildResolution:
    """Outcome of resolving a whole build descriptor.

    ``manifest`` is ``None`` when manifest resolution failed; the failure is
    kept in ``manifest_error`` and variants are still resolved.
    """

    manifest: ResolvedManifestMetadata | None = None
    manifest_error: VariantboxError | None = None
    variants: VariantResolution = field(default_factory=VariantResolution)

    @property
    def success(self) -> bool:
        return self.manifest_error is None and self.variants.success

    def error_lines(self) -> list[str]:
        lines = []
        if self.manifest_error is not None:
            lines.append(f"manifest: {self.manifest_error}")
        lines.extend(self.variants.error_lines())
        return lines

    def to_dict(self, reveal_secrets: bool = False) -> dict[str, Any]:
        variants = self.variants.to_dict(reveal_secrets=reveal_secrets)
        return {
            "success": self.success,
            "manifest": self.manifest.to_dict() if self.manifest else None,
            "variants": variants["variants"],
            "errors": self.error_lines(),
        }

    def to_json(self, reveal_secrets: bool = False) -> str:
        """Serialize deterministically; identical input gives identical text."""
        return json.dumps(self.to_dict(reveal_secrets=reveal_secrets), indent=2)

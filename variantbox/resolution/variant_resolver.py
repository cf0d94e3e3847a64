"""Variant resolver: declared build variants to fully populated configs."""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from variantbox.core.errors import (
    DescriptorError,
    DuplicateVariantError,
    IncompleteSigningIdentityError,
    InvalidVariantConfigError,
    InvalidVariantNameError,
    MissingSigningIdentityError,
    UnknownSigningConfigError,
    VariantError,
)
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.base import validation_error_details
from variantbox.models.results import VariantResolution
from variantbox.models.signing import SigningIdentity
from variantbox.models.variant import PartialVariantConfig, VariantConfig


logger = get_struct_logger(__name__)

DEBUG_VARIANT = "debug"
DEFAULTS_NAME = "defaults"

DeclaredVariants = (
    Mapping[str, PartialVariantConfig] | Iterable[tuple[Any, PartialVariantConfig]]
)


class VariantResolver:
    """Resolve declared build variants against a set of defaults.

    The resolver is stateless: every call is independent, reads nothing
    from the filesystem or environment, and returns the same result for
    the same input.
    """

    def resolve(
        self,
        declared_variants: DeclaredVariants,
        defaults: VariantConfig,
        signing_configs: Mapping[str, SigningIdentity] | None = None,
    ) -> VariantResolution:
        """Resolve every declared variant.

        Args:
            declared_variants: Mapping of name to partial config, or ordered
                ``(name, partial)`` pairs. Pairs may repeat a name.
            defaults: Values used for any field a variant leaves out
            signing_configs: Named signing identities variants may reference

        Returns:
            VariantResolution: Resolved variants plus per-variant errors.
            Invalid or duplicate names reject the whole set.
        """
        pairs = self._as_pairs(declared_variants)

        input_errors = self._validate_names([name for name, _ in pairs])
        if input_errors:
            logger.warning(
                "variant_set_rejected",
                declared=len(pairs),
                error_count=len(input_errors),
            )
            return VariantResolution(errors=input_errors)

        configs = signing_configs or {}
        result = VariantResolution()
        for name, partial in pairs:
            try:
                result.variants[name] = self._resolve_variant(
                    name, self._as_partial(name, partial), defaults, configs
                )
            except VariantError as e:
                logger.warning(
                    "variant_resolution_failed",
                    variant=name,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                result.errors.append(e)

        logger.info(
            "variants_resolved",
            resolved=len(result.variants),
            failed=len(result.errors),
        )
        return result

    def build_defaults(
        self,
        partial: PartialVariantConfig,
        signing_configs: Mapping[str, SigningIdentity] | None = None,
    ) -> VariantConfig:
        """Turn declared defaults into a complete ``VariantConfig``.

        Raises:
            DescriptorError: If the defaults reference an unknown signing config
        """
        configs = signing_configs or {}
        try:
            identity, config_name = self._lookup_signing(
                DEFAULTS_NAME, partial.signing, configs
            )
        except UnknownSigningConfigError as e:
            raise DescriptorError(str(e)) from e

        return VariantConfig(
            name=DEFAULTS_NAME,
            signing_identity=identity,
            signing_config=config_name,
            minify_enabled=bool(partial.minify_enabled),
            shrink_rule_files=tuple(partial.shrink_rule_files or ()),
            debuggable=bool(partial.debuggable),
        )

    def _as_pairs(self, declared_variants: DeclaredVariants) -> list[tuple[Any, Any]]:
        if isinstance(declared_variants, Mapping):
            return list(declared_variants.items())
        return list(declared_variants)

    def _as_partial(self, name: str, partial: Any) -> PartialVariantConfig:
        if isinstance(partial, PartialVariantConfig):
            return partial
        try:
            return PartialVariantConfig.model_validate(partial or {})
        except ValidationError as e:
            raise InvalidVariantConfigError(
                name, validation_error_details(e)
            ) from e

    def _validate_names(self, names: list[Any]) -> list[VariantError]:
        errors: list[VariantError] = []
        for name in names:
            if not isinstance(name, str) or not name.strip():
                errors.append(InvalidVariantNameError(name))

        counts = Counter(name for name in names if isinstance(name, str))
        for name, count in counts.items():
            if count > 1 and name.strip():
                errors.append(DuplicateVariantError(name, count))
        return errors

    def _resolve_variant(
        self,
        name: str,
        partial: PartialVariantConfig,
        defaults: VariantConfig,
        signing_configs: Mapping[str, SigningIdentity],
    ) -> VariantConfig:
        if partial.debuggable is not None:
            debuggable = partial.debuggable
        else:
            debuggable = name == DEBUG_VARIANT or defaults.debuggable

        minify_enabled = (
            partial.minify_enabled
            if partial.minify_enabled is not None
            else defaults.minify_enabled
        )
        shrink_rule_files = (
            tuple(partial.shrink_rule_files)
            if partial.shrink_rule_files is not None
            else defaults.shrink_rule_files
        )

        if partial.signing is not None:
            identity, config_name = self._lookup_signing(
                name, partial.signing, signing_configs
            )
        else:
            identity, config_name = defaults.signing_identity, defaults.signing_config

        # Debuggable variants fall back to the platform debug keystore
        if identity is None and debuggable and DEBUG_VARIANT in signing_configs:
            identity, config_name = signing_configs[DEBUG_VARIANT], DEBUG_VARIANT

        if not debuggable:
            if identity is None:
                raise MissingSigningIdentityError(name)
            missing = identity.missing_fields()
            if missing:
                raise IncompleteSigningIdentityError(name, missing)

        self._check_shrinking(name, minify_enabled, shrink_rule_files)

        variant = VariantConfig(
            name=name,
            signing_identity=identity,
            signing_config=config_name,
            minify_enabled=minify_enabled,
            shrink_rule_files=shrink_rule_files,
            debuggable=debuggable,
        )
        logger.debug(
            "variant_resolved",
            variant=name,
            signing_config=config_name,
            signed=identity is not None,
            minify_enabled=minify_enabled,
            rule_files=len(shrink_rule_files),
        )
        return variant

    def _lookup_signing(
        self,
        name: str,
        signing: SigningIdentity | str | None,
        signing_configs: Mapping[str, SigningIdentity],
    ) -> tuple[SigningIdentity | None, str | None]:
        if signing is None:
            return None, None
        if isinstance(signing, str):
            if signing not in signing_configs:
                raise UnknownSigningConfigError(name, signing)
            return signing_configs[signing], signing
        return signing, None

    def _check_shrinking(
        self, name: str, minify_enabled: bool, shrink_rule_files: tuple[str, ...]
    ) -> None:
        if minify_enabled and not shrink_rule_files:
            logger.info("minify_using_builtin_rules", variant=name)
        elif shrink_rule_files and not minify_enabled:
            logger.warning(
                "shrink_rule_files_ignored",
                variant=name,
                rule_files=list(shrink_rule_files),
            )


def create_variant_resolver() -> VariantResolver:
    """Create variant resolver instance.

    Returns:
        VariantResolver: New variant resolver
    """
    return VariantResolver()

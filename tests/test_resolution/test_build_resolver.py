"""Test BuildResolver class."""

import json

from variantbox.config.descriptor_loader import parse_descriptor
from variantbox.config.models.platform import PlatformValues
from variantbox.core.errors import (
    DuplicateVariantError,
    InvalidSdkRangeError,
    MissingSigningIdentityError,
    PlatformValueError,
)
from variantbox.models import BuildDescriptor
from variantbox.resolution.build_resolver import (
    BuildResolver,
    create_build_resolver,
)


PLATFORM = PlatformValues(
    compile_sdk=35, target_sdk=34, version_code=17, version_name="1.4.2"
)


class TestBuildResolver:
    """Test BuildResolver functionality."""

    def setup_method(self):
        self.resolver = create_build_resolver(debug_keystore_path="/keys/debug.jks")

    def test_create_build_resolver(self):
        assert isinstance(self.resolver, BuildResolver)
        assert self.resolver.debug_keystore_path == "/keys/debug.jks"

    def test_resolve_full_descriptor(self, descriptor_data):
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        result = self.resolver.resolve(descriptor, PLATFORM)

        assert result.success
        assert result.error_lines() == []
        assert result.manifest is not None
        assert result.manifest.application_id == "com.example.boomverse"
        assert result.manifest.target_sdk == 34

        release = result.variants.variants["release"]
        assert release.signing_config == "release"
        assert release.signing_identity.key_alias == "upload"
        assert release.minify_enabled is True

        debug = result.variants.variants["debug"]
        assert debug.signing_config == "debug"
        assert debug.signing_identity.store_path == "/keys/debug.jks"
        assert debug.signing_identity.key_alias == "androiddebugkey"

    def test_declared_debug_signing_config_wins(self, descriptor_data):
        descriptor_data["signingConfigs"]["debug"] = {
            "storePath": "keys/team-debug.jks",
            "storePassword": "team",
            "keyAlias": "team-debug",
            "keyPassword": "team",
        }
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        result = self.resolver.resolve(descriptor, PLATFORM)

        debug = result.variants.variants["debug"]
        assert debug.signing_identity.store_path == "keys/team-debug.jks"

    def test_manifest_failure_does_not_stop_variants(self, descriptor_data):
        descriptor_data["minSdk"] = 30
        descriptor_data["targetSdk"] = 23
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        result = self.resolver.resolve(descriptor, PLATFORM)

        assert not result.success
        assert result.manifest is None
        assert isinstance(result.manifest_error, InvalidSdkRangeError)
        assert set(result.variants.variants) == {"release", "debug"}
        assert result.error_lines()[0].startswith("manifest: minSdk (30)")

    def test_missing_platform_values_reported(self, descriptor_data):
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        result = self.resolver.resolve(descriptor)

        assert isinstance(result.manifest_error, PlatformValueError)
        assert result.variants.success

    def test_variant_failures_collected(self, descriptor_data):
        descriptor_data["variants"]["staging"] = {"minifyEnabled": True}
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        result = self.resolver.resolve(descriptor, PLATFORM)

        assert not result.success
        assert set(result.variants.variants) == {"release", "debug"}
        error = result.variants.errors[0]
        assert isinstance(error, MissingSigningIdentityError)
        assert result.error_lines() == [f"staging: {error}"]

    def test_duplicate_variants_from_yaml(self):
        descriptor = parse_descriptor(
            """
applicationId: com.example.app
minSdk: 23
variants:
  release:
    minifyEnabled: true
  release:
    minifyEnabled: false
"""
        )
        result = self.resolver.resolve(descriptor, PLATFORM)

        assert result.variants.variants == {}
        assert isinstance(result.variants.errors[0], DuplicateVariantError)
        assert result.manifest is not None

    def test_defaults_apply_to_variants(self, descriptor_data):
        descriptor_data["defaults"] = {"signing": "release", "minifyEnabled": True}
        descriptor_data["variants"]["staging"] = {}
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        result = self.resolver.resolve(descriptor, PLATFORM)

        assert result.success
        staging = result.variants.variants["staging"]
        assert staging.signing_config == "release"
        assert staging.minify_enabled is True

    def test_to_json_is_deterministic_and_masked(self, descriptor_data):
        descriptor = BuildDescriptor.model_validate(descriptor_data)

        first = self.resolver.resolve(descriptor, PLATFORM).to_json()
        second = self.resolver.resolve(descriptor, PLATFORM).to_json()

        assert first == second
        assert "store-secret-123" not in first
        assert "key-secret-456" not in first

        data = json.loads(first)
        assert data["success"] is True
        assert data["manifest"]["applicationId"] == "com.example.boomverse"
        release = data["variants"]["release"]
        assert release["signingIdentity"]["storePassword"] == "**********"
        assert release["shrinkRuleFiles"] == [
            "proguard-android-optimize.txt",
            "proguard-rules.pro",
        ]

    def test_to_json_reveal_secrets(self, descriptor_data):
        descriptor = BuildDescriptor.model_validate(descriptor_data)
        data = json.loads(
            self.resolver.resolve(descriptor, PLATFORM).to_json(reveal_secrets=True)
        )

        identity = data["variants"]["release"]["signingIdentity"]
        assert identity["storePassword"] == "store-secret-123"
        assert identity["keyPassword"] == "key-secret-456"

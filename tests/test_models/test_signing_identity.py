"""Tests for signing and variant models."""

import pytest
from pydantic import SecretStr, ValidationError

from variantbox.models import (
    PartialVariantConfig,
    SigningIdentity,
    VariantConfig,
    debug_signing_identity,
)


class TestSigningIdentity:
    def test_complete_identity(self, release_identity):
        assert release_identity.is_complete()
        assert release_identity.missing_fields() == []

    def test_missing_fields_use_descriptor_names(self):
        identity = SigningIdentity(store_path="keys/upload.jks")

        assert not identity.is_complete()
        assert identity.missing_fields() == ["storePassword", "keyAlias", "keyPassword"]

    def test_secrets_hidden_in_repr(self, release_identity):
        text = repr(release_identity) + str(release_identity)

        assert "store-secret-123" not in text
        assert "key-secret-456" not in text

    def test_to_dict_masks_secrets(self, release_identity):
        data = release_identity.to_dict()

        assert data == {
            "storePath": "keys/upload-keystore.jks",
            "storePassword": "**********",
            "keyAlias": "upload",
            "keyPassword": "**********",
        }

    def test_to_dict_reveal_secrets(self, release_identity):
        data = release_identity.to_dict(reveal_secrets=True)

        assert data["storePassword"] == "store-secret-123"
        assert data["keyPassword"] == "key-secret-456"

    def test_empty_secret_not_masked(self):
        assert SigningIdentity().to_dict()["storePassword"] == ""

    def test_passwords_are_independent(self):
        identity = SigningIdentity(
            store_path="keys/a.jks",
            store_password=SecretStr("same"),
            key_alias="a",
            key_password=SecretStr(""),
        )

        assert identity.missing_fields() == ["keyPassword"]

    def test_frozen(self, release_identity):
        with pytest.raises(ValidationError):
            release_identity.key_alias = "other"

    def test_debug_signing_identity(self):
        identity = debug_signing_identity("~/.android/debug.keystore")

        assert identity.is_complete()
        assert identity.store_path == "~/.android/debug.keystore"
        assert identity.key_alias == "androiddebugkey"
        assert identity.store_password.get_secret_value() == "android"


class TestVariantModels:
    def test_partial_accepts_aliases(self):
        partial = PartialVariantConfig.model_validate(
            {"minifyEnabled": True, "shrinkRuleFiles": "proguard-rules.pro"}
        )

        assert partial.minify_enabled is True
        assert partial.shrink_rule_files == ["proguard-rules.pro"]
        assert partial.signing is None

    def test_partial_signing_reference_or_inline(self):
        by_name = PartialVariantConfig.model_validate({"signing": "release"})
        inline = PartialVariantConfig.model_validate(
            {"signing": {"storePath": "keys/a.jks", "keyAlias": "a"}}
        )

        assert by_name.signing == "release"
        assert isinstance(inline.signing, SigningIdentity)

    def test_variant_config_is_frozen(self):
        variant = VariantConfig(name="release")

        with pytest.raises(ValidationError):
            variant.minify_enabled = True

    def test_requires_signing(self):
        assert VariantConfig(name="release").requires_signing
        assert not VariantConfig(name="debug", debuggable=True).requires_signing

    def test_partial_rejects_unknown_keys(self):
        with pytest.raises(ValidationError, match="minifyEnable"):
            PartialVariantConfig.model_validate({"minifyEnable": True})

    def test_signing_identity_rejects_unknown_keys(self):
        with pytest.raises(ValidationError, match="keyAlais"):
            SigningIdentity.model_validate({"storePath": "keys/a.jks", "keyAlais": "a"})

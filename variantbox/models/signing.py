"""Signing identity model."""

from pydantic import ConfigDict, Field, SecretStr, SerializationInfo, field_serializer

from variantbox.models.base import VariantboxBaseModel


MASKED_SECRET = "**********"

# Platform debug keystore defaults
DEBUG_KEYSTORE_PASSWORD = "android"
DEBUG_KEY_ALIAS = "androiddebugkey"


class SigningIdentity(VariantboxBaseModel):
    """Credential set used to sign a package.

    Passwords are kept as ``SecretStr`` so they never show up in ``repr``,
    logs or JSON output unless serialized with ``reveal_secrets=True``.
    The store file is never opened here; that is the signer's job.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    store_path: str = Field(default="", alias="storePath")
    store_password: SecretStr = Field(default=SecretStr(""), alias="storePassword")
    key_alias: str = Field(default="", alias="keyAlias")
    key_password: SecretStr = Field(default=SecretStr(""), alias="keyPassword")

    @field_serializer("store_password", "key_password", when_used="json")
    def serialize_secret(self, value: SecretStr, info: SerializationInfo) -> str:
        if info.context and info.context.get("reveal_secrets"):
            return value.get_secret_value()
        return MASKED_SECRET if value.get_secret_value() else ""

    def missing_fields(self) -> list[str]:
        """Return descriptor names of fields that are empty."""
        missing = []
        if not self.store_path:
            missing.append("storePath")
        if not self.store_password.get_secret_value():
            missing.append("storePassword")
        if not self.key_alias:
            missing.append("keyAlias")
        if not self.key_password.get_secret_value():
            missing.append("keyPassword")
        return missing

    def is_complete(self) -> bool:
        """Check that every field needed for signing is populated."""
        return not self.missing_fields()


def debug_signing_identity(store_path: str) -> SigningIdentity:
    """Create the platform's well-known debug signing identity.

    Args:
        store_path: Location of the debug keystore (not expanded or checked)
    """
    return SigningIdentity(
        store_path=store_path,
        store_password=SecretStr(DEBUG_KEYSTORE_PASSWORD),
        key_alias=DEBUG_KEY_ALIAS,
        key_password=SecretStr(DEBUG_KEYSTORE_PASSWORD),
    )

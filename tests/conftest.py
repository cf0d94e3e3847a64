"""Core test fixtures for the variantbox project."""

import os
from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import SecretStr
from typer.testing import CliRunner

from variantbox.models import PartialVariantConfig, SigningIdentity, VariantConfig


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


# ---- Test Isolation Fixtures ----


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user configuration lookups inside a temporary directory.

    - Removes VARIANTBOX_ environment variables
    - Points XDG_CONFIG_HOME at an empty directory
    - Changes into tmp_path so no project-level config is picked up
    """
    for key in list(os.environ):
        if key.startswith("VARIANTBOX_"):
            monkeypatch.delenv(key)

    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---- Domain Fixtures ----


@pytest.fixture
def release_identity() -> SigningIdentity:
    """Complete upload signing identity."""
    return SigningIdentity(
        store_path="keys/upload-keystore.jks",
        store_password=SecretStr("store-secret-123"),
        key_alias="upload",
        key_password=SecretStr("key-secret-456"),
    )


@pytest.fixture
def unsigned_defaults() -> VariantConfig:
    """Defaults without a signing identity."""
    return VariantConfig(name="defaults")


@pytest.fixture
def signed_defaults(release_identity: SigningIdentity) -> VariantConfig:
    """Defaults carrying the release signing identity."""
    return VariantConfig(
        name="defaults",
        signing_identity=release_identity,
        signing_config="release",
    )


@pytest.fixture
def declared_variants(release_identity: SigningIdentity) -> dict[str, PartialVariantConfig]:
    """Debug and release variants as in a typical Flutter app."""
    return {
        "release": PartialVariantConfig(
            signing=release_identity,
            minify_enabled=True,
            shrink_rule_files=["proguard-android-optimize.txt", "proguard-rules.pro"],
        ),
        "debug": PartialVariantConfig(minify_enabled=False),
    }


@pytest.fixture
def descriptor_data() -> dict[str, Any]:
    """Descriptor mirroring a Flutter app's platform packaging file."""
    return {
        "applicationId": "com.example.boomverse",
        "namespace": "com.example.boomverse",
        "minSdk": 23,
        "ndkVersion": "27.0.12077973",
        "signingConfigs": {
            "release": {
                "storePath": "keys/upload-keystore.jks",
                "storePassword": "store-secret-123",
                "keyAlias": "upload",
                "keyPassword": "key-secret-456",
            }
        },
        "variants": {
            "release": {
                "signing": "release",
                "minifyEnabled": True,
                "shrinkRuleFiles": [
                    "proguard-android-optimize.txt",
                    "proguard-rules.pro",
                ],
            },
            "debug": {"minifyEnabled": False},
        },
    }


@pytest.fixture
def descriptor_file(tmp_path: Path, descriptor_data: dict[str, Any]) -> Path:
    """Descriptor written to a YAML file."""
    path = tmp_path / "build.yaml"
    with path.open("w", encoding="utf-8") as f:
        yaml.dump(descriptor_data, f, sort_keys=False)
    return path


@pytest.fixture
def pubspec_file(tmp_path: Path) -> Path:
    """Flutter pubspec with a version line."""
    path = tmp_path / "pubspec.yaml"
    path.write_text(
        "name: boomverse\nversion: 1.4.2+17\nenvironment:\n  sdk: '>=3.0.0 <4.0.0'\n",
        encoding="utf-8",
    )
    return path

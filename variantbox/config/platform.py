"""Load platform values from a Flutter project."""

import re
from pathlib import Path

import yaml

from variantbox.config.models.platform import PlatformValues
from variantbox.core.errors import PlatformValueError
from variantbox.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

# Flutter writes ``version: <name>+<build number>``
FLUTTER_VERSION_RE = re.compile(r"^(?P<name>[^+\s]+)(?:\+(?P<code>\d+))?$")

# Build number used by Flutter when pubspec omits one
DEFAULT_VERSION_CODE = 1


def parse_flutter_version(version: str) -> tuple[str, int]:
    """Split a pubspec version string into version name and code.

    Args:
        version: Version such as ``"1.2.3+45"`` or ``"1.2.3"``

    Returns:
        tuple[str, int]: ``("1.2.3", 45)``; the code defaults to 1

    Raises:
        PlatformValueError: If the string is not a valid pubspec version
    """
    match = FLUTTER_VERSION_RE.match(str(version).strip())
    if not match:
        raise PlatformValueError(f"Invalid pubspec version '{version}'")

    code = match.group("code")
    return match.group("name"), int(code) if code else DEFAULT_VERSION_CODE


def load_pubspec_platform_values(pubspec_path: Path) -> PlatformValues:
    """Read version name and code from a Flutter ``pubspec.yaml``.

    Args:
        pubspec_path: Path to pubspec.yaml

    Returns:
        PlatformValues: Version values; SDK values are left unset

    Raises:
        PlatformValueError: If the file cannot be read or parsed
    """
    try:
        with pubspec_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise PlatformValueError(f"Failed to read {pubspec_path}: {e}") from e

    if not isinstance(data, dict):
        raise PlatformValueError(f"{pubspec_path} is not a YAML mapping")

    version = data.get("version")
    if version is None:
        logger.debug("pubspec_without_version", path=str(pubspec_path))
        return PlatformValues()

    version_name, version_code = parse_flutter_version(str(version))
    logger.debug(
        "pubspec_version_loaded",
        path=str(pubspec_path),
        version_name=version_name,
        version_code=version_code,
    )
    return PlatformValues(version_name=version_name, version_code=version_code)

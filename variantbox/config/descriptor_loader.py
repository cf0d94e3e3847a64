"""Load build descriptors from YAML.

Descriptors are read with a loader that refuses duplicate mapping keys,
except directly under ``variants`` where entries are kept as ordered
``(name, config)`` pairs so the resolver can report duplicate variants.

Signing fields may reference environment variables as ``${NAME}``; the
environment mapping is always passed in by the caller.
"""

import re
from collections.abc import Hashable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from variantbox.core.errors import DescriptorError
from variantbox.core.structlog_logger import get_struct_logger
from variantbox.models.base import validation_error_details
from variantbox.models.descriptor import BuildDescriptor


logger = get_struct_logger(__name__)

VARIANTS_KEY = "variants"
ENV_REFERENCE_RE = re.compile(r"^\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}$")
MERGE_TAG = "tag:yaml.org,2002:merge"


class UniqueKeyLoader(yaml.SafeLoader):
    """Safe YAML loader that fails on duplicate mapping keys."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Any:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)  # type: ignore[no-untyped-call]
            if isinstance(key, Hashable):
                if key in seen:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _load_yaml(text: str) -> dict[str, Any]:
    loader = UniqueKeyLoader(text)
    try:
        node = loader.get_single_node()
        if node is None:
            return {}
        if not isinstance(node, yaml.MappingNode):
            raise DescriptorError("Descriptor must be a YAML mapping")

        loader.flatten_mapping(node)
        data: dict[str, Any] = {}
        for key_node, value_node in node.value:
            key = loader.construct_object(key_node, deep=True)
            if key in data:
                raise DescriptorError(f"Duplicate descriptor key '{key}'")

            if key == VARIANTS_KEY and isinstance(value_node, yaml.SequenceNode):
                raise DescriptorError(
                    "'variants' must be a mapping of variant name to config"
                )
            if key == VARIANTS_KEY and isinstance(value_node, yaml.MappingNode):
                loader.flatten_mapping(value_node)
                data[key] = [
                    (
                        loader.construct_object(name_node, deep=True),
                        loader.construct_object(config_node, deep=True),
                    )
                    for name_node, config_node in value_node.value
                ]
            else:
                data[key] = loader.construct_object(value_node, deep=True)
        return data
    finally:
        loader.dispose()


def _yaml_error_message(error: yaml.YAMLError) -> str:
    """Describe a YAML error by problem and position only.

    PyYAML's own message quotes the offending source line, which may hold
    a password.
    """
    if isinstance(error, yaml.MarkedYAMLError) and error.problem:
        message = error.problem
        mark = error.problem_mark
        if mark is not None:
            message += f" (line {mark.line + 1}, column {mark.column + 1})"
        return message
    return type(error).__name__


def _expand_signing(signing: Any, environ: Mapping[str, str], where: str) -> Any:
    if not isinstance(signing, dict):
        return signing

    expanded = {}
    for field, value in signing.items():
        match = ENV_REFERENCE_RE.match(value) if isinstance(value, str) else None
        if match:
            env_name = match.group("name")
            if env_name not in environ:
                raise DescriptorError(
                    f"Environment variable '{env_name}' referenced by "
                    f"{where}.{field} is not set"
                )
            value = environ[env_name]
        expanded[field] = value
    return expanded


def expand_env_references(
    data: dict[str, Any], environ: Mapping[str, str]
) -> dict[str, Any]:
    """Replace ``${NAME}`` references in signing fields.

    Args:
        data: Raw descriptor data as loaded from YAML
        environ: Environment used for lookups

    Returns:
        dict: Copy of ``data`` with references expanded

    Raises:
        DescriptorError: If a referenced variable is not set
    """
    result = dict(data)

    signing_configs = result.get("signingConfigs")
    if isinstance(signing_configs, dict):
        result["signingConfigs"] = {
            name: _expand_signing(identity, environ, f"signingConfigs.{name}")
            for name, identity in signing_configs.items()
        }

    defaults = result.get("defaults")
    if isinstance(defaults, dict) and "signing" in defaults:
        result["defaults"] = {
            **defaults,
            "signing": _expand_signing(
                defaults["signing"], environ, "defaults.signing"
            ),
        }

    variants = result.get(VARIANTS_KEY)
    if isinstance(variants, list):
        expanded_variants = []
        for entry in variants:
            if not isinstance(entry, tuple | list) or len(entry) != 2:
                # Left for model validation to reject
                expanded_variants.append(entry)
                continue
            name, config = entry
            if isinstance(config, dict) and "signing" in config:
                config = {
                    **config,
                    "signing": _expand_signing(
                        config["signing"], environ, f"variants.{name}.signing"
                    ),
                }
            expanded_variants.append((name, config))
        result[VARIANTS_KEY] = expanded_variants

    return result


def parse_descriptor(
    text: str, environ: Mapping[str, str] | None = None
) -> BuildDescriptor:
    """Parse descriptor YAML text.

    Args:
        text: YAML document
        environ: Environment for ``${NAME}`` references (empty if omitted)

    Returns:
        BuildDescriptor: Validated descriptor

    Raises:
        DescriptorError: If the YAML is invalid or fails validation
    """
    try:
        data = _load_yaml(text)
    except yaml.YAMLError as e:
        raise DescriptorError(
            f"Failed to parse descriptor: {_yaml_error_message(e)}"
        ) from e

    data = expand_env_references(data, environ or {})

    try:
        return BuildDescriptor.model_validate(data)
    except ValidationError as e:
        raise DescriptorError(
            f"Invalid descriptor: {validation_error_details(e)}"
        ) from e


def load_descriptor(
    descriptor_path: str | Path, environ: Mapping[str, str] | None = None
) -> BuildDescriptor:
    """Load and validate a descriptor file.

    Raises:
        DescriptorError: If the file cannot be read or is invalid
    """
    descriptor_path = Path(descriptor_path)
    logger.debug("loading_descriptor", path=str(descriptor_path))
    try:
        text = descriptor_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DescriptorError(f"Failed to read descriptor {descriptor_path}: {e}") from e

    descriptor = parse_descriptor(text, environ)
    logger.debug(
        "descriptor_loaded",
        path=str(descriptor_path),
        application_id=descriptor.application_id,
        variants=len(descriptor.variants),
    )
    return descriptor

"""Filter parameter parsing at the configuration boundary.

This module converts loosely-typed parameter mappings, and YAML or JSON
parameter files, into typed ``FilterParameters``. Criterion values that
are not lists are treated as absent rather than rejected, so a filter
built from any mapping is always valid.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Sequence, cast

import yaml

from core.constants import (
    ACCEPTED_DEVICE_ID_TYPES_KEY,
    ACCEPTED_DEVICE_IDS_KEY,
    ACCEPTED_DEVICE_SIGNATURES_KEY,
    FILTER_PARAMETER_ALIASES,
    FILTER_PARAMETER_KEYS,
    FILTER_SECTION_KEY,
)
from core.errors import SpatemConfigError
from core.logging_config import get_logger
from core.types import FilterParameters

_LOGGER = get_logger(__name__)


def parse_filter_parameters(mapping: Mapping[str, object] | None) -> FilterParameters:
    """Build typed filter parameters from a wire mapping.

    Args:
        mapping: Parameter mapping, or None for accept-all parameters.

    Returns:
        Parameters holding exactly the criteria supplied as lists.
    """
    if mapping is None:
        return FilterParameters()
    if not isinstance(mapping, Mapping):
        _LOGGER.debug("filter_parameter_ignored", reason="not_a_mapping")
        return FilterParameters()
    normalized = _normalize_keys(mapping)
    return FilterParameters(
        accepted_device_signatures=_optional_sequence(normalized, ACCEPTED_DEVICE_SIGNATURES_KEY),
        accepted_device_ids=_optional_sequence(normalized, ACCEPTED_DEVICE_IDS_KEY),
        accepted_device_id_types=_optional_sequence(normalized, ACCEPTED_DEVICE_ID_TYPES_KEY),
    )


def load_filter_parameters(parameters_path: str) -> FilterParameters:
    """Load filter parameters from a YAML or JSON file.

    The root mapping holds the wire keys directly or nests them under
    a top-level ``filter`` key.

    Args:
        parameters_path: File path to the parameter file.

    Returns:
        Parsed filter parameters. An empty file accepts everything.

    Raises:
        SpatemConfigError: If the file is missing, unreadable, unparsable,
            or its root is not a mapping.
    """
    payload = _load_yaml_payload(parameters_path)
    if payload is None:
        return FilterParameters()
    root_mapping = _expect_mapping(payload, "filter parameters root")
    section = root_mapping.get(FILTER_SECTION_KEY)
    if section is not None:
        root_mapping = _expect_mapping(section, f"'{FILTER_SECTION_KEY}' section")
    return parse_filter_parameters(root_mapping)


def _load_yaml_payload(parameters_path: str) -> object:
    parameters_file = Path(parameters_path).expanduser().resolve()
    if not parameters_file.exists():
        raise SpatemConfigError(
            f"Filter parameters file does not exist at {parameters_file}. "
            "Provide a valid YAML or JSON file path."
        )
    try:
        return cast(object, yaml.safe_load(parameters_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise SpatemConfigError(
            f"Failed to read filter parameters at {parameters_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise SpatemConfigError(
            f"Failed to parse filter parameters at {parameters_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return cast(Mapping[str, object], value)
    raise SpatemConfigError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _normalize_keys(mapping: Mapping[str, object]) -> dict[str, object]:
    """Map snake_case aliases onto wire keys; wire keys take precedence."""
    normalized: dict[str, object] = {}
    for key, value in mapping.items():
        if key in FILTER_PARAMETER_KEYS:
            normalized[key] = value
        elif key in FILTER_PARAMETER_ALIASES:
            normalized.setdefault(FILTER_PARAMETER_ALIASES[key], value)
        else:
            _LOGGER.debug("filter_parameter_ignored", key=str(key), reason="unknown_key")
    return normalized


def _optional_sequence(mapping: Mapping[str, object], key: str) -> tuple[Any, ...] | None:
    if key not in mapping:
        return None
    value = mapping[key]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(value)
    _LOGGER.debug(
        "filter_parameter_ignored",
        key=key,
        reason="not_a_list",
        value_type=type(value).__name__,
    )
    return None

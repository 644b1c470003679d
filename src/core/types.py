"""Shared typed models.

This module defines immutable data models used by the parameter
loader and the filter to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from core.constants import (
    ACCEPTED_DEVICE_ID_TYPES_KEY,
    ACCEPTED_DEVICE_IDS_KEY,
    ACCEPTED_DEVICE_SIGNATURES_KEY,
)


@dataclass(frozen=True)
class Spatem:
    """Device-originated record evaluated by the filter.

    Attributes:
        device_id: Device identifier, e.g. a MAC-style address.
        device_id_type: Identifier-type tag of ``device_id``.
        extra_fields: Other record fields, never inspected by the filter.
    """

    device_id: Any = None
    device_id_type: Any = None
    extra_fields: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class FilterParameters:
    """Acceptance criteria for a spatem filter.

    A ``None`` field means the criterion is absent. An empty tuple means
    the criterion is present and no record can satisfy it. Lists become
    tuples; strings and other non-list values leave the criterion absent.

    Attributes:
        accepted_device_signatures: Accepted ``deviceId/deviceIdType`` strings.
        accepted_device_ids: Accepted device identifier values.
        accepted_device_id_types: Accepted identifier-type tag values.
    """

    accepted_device_signatures: tuple[str, ...] | None = None
    accepted_device_ids: tuple[Any, ...] | None = None
    accepted_device_id_types: tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        for name in (
            "accepted_device_signatures",
            "accepted_device_ids",
            "accepted_device_id_types",
        ):
            value = getattr(self, name)
            if value is None or isinstance(value, tuple):
                continue
            if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
                object.__setattr__(self, name, tuple(value))
            else:
                object.__setattr__(self, name, None)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object] | None) -> "FilterParameters":
        """Build parameters from a loosely-typed wire mapping.

        Args:
            mapping: Mapping keyed by ``acceptedDeviceSignatures``,
                ``acceptedDeviceIds`` and ``acceptedDeviceIdTypes``.

        Returns:
            Parameters holding exactly the criteria given as lists.
        """
        from core.filter_parameters import parse_filter_parameters

        return parse_filter_parameters(mapping)

    def to_mapping(self) -> dict[str, list[Any]]:
        """Render present criteria in wire form."""
        mapping: dict[str, list[Any]] = {}
        if self.accepted_device_signatures is not None:
            mapping[ACCEPTED_DEVICE_SIGNATURES_KEY] = list(self.accepted_device_signatures)
        if self.accepted_device_ids is not None:
            mapping[ACCEPTED_DEVICE_IDS_KEY] = list(self.accepted_device_ids)
        if self.accepted_device_id_types is not None:
            mapping[ACCEPTED_DEVICE_ID_TYPES_KEY] = list(self.accepted_device_id_types)
        return mapping

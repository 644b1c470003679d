"""Spatem acceptance filter.

This module holds configured acceptance criteria and decides whether
a spatem record passes them. Criteria are immutable after construction
and decisions are pure, so one filter can be shared across threads.
"""

from __future__ import annotations

from typing import Any, Iterable, Literal, Mapping, TypeVar

from core.filter_parameters import parse_filter_parameters
from core.logging_config import get_logger
from core.types import FilterParameters
from filters.spatem_fields import build_device_signature, read_device_id, read_device_id_type

FilterCriterion = Literal[
    "acceptedDeviceSignatures",
    "acceptedDeviceIdTypes",
    "acceptedDeviceIds",
]
EVALUATION_ORDER: tuple[FilterCriterion, ...] = (
    "acceptedDeviceSignatures",
    "acceptedDeviceIdTypes",
    "acceptedDeviceIds",
)

SpatemT = TypeVar("SpatemT")

_LOGGER = get_logger(__name__)


class SpatemFilter:
    """Maintain and apply acceptance criteria for spatems.

    Each criterion is either present (configured with a list, possibly
    empty) or absent. Present criteria combine with logical AND; a filter
    with no present criteria accepts every record.
    """

    def __init__(
        self,
        parameters: FilterParameters | Mapping[str, object] | None = None,
    ) -> None:
        """Create a filter from typed or wire-form parameters.

        Args:
            parameters: ``FilterParameters``, a mapping keyed by
                ``acceptedDeviceSignatures``, ``acceptedDeviceIds`` and
                ``acceptedDeviceIdTypes``, or None to accept everything.
                Non-list criterion values are treated as absent.
        """
        if isinstance(parameters, FilterParameters):
            self._parameters = parameters
        else:
            self._parameters = parse_filter_parameters(parameters)
        _LOGGER.debug("spatem_filter_configured", criteria=list(self.active_criteria))

    @property
    def parameters(self) -> FilterParameters:
        """Configured criteria in typed form."""
        return self._parameters

    @property
    def accepted_device_signatures(self) -> tuple[str, ...] | None:
        return self._parameters.accepted_device_signatures

    @property
    def accepted_device_ids(self) -> tuple[Any, ...] | None:
        return self._parameters.accepted_device_ids

    @property
    def accepted_device_id_types(self) -> tuple[Any, ...] | None:
        return self._parameters.accepted_device_id_types

    @property
    def has_accepted_device_signatures(self) -> bool:
        """Whether the filter observes accepted device signatures."""
        return self._parameters.accepted_device_signatures is not None

    @property
    def has_accepted_device_ids(self) -> bool:
        """Whether the filter observes accepted device ids."""
        return self._parameters.accepted_device_ids is not None

    @property
    def has_accepted_device_id_types(self) -> bool:
        """Whether the filter observes accepted device id types."""
        return self._parameters.accepted_device_id_types is not None

    @property
    def active_criteria(self) -> tuple[FilterCriterion, ...]:
        """Present criteria in evaluation order."""
        present = {
            "acceptedDeviceSignatures": self.has_accepted_device_signatures,
            "acceptedDeviceIdTypes": self.has_accepted_device_id_types,
            "acceptedDeviceIds": self.has_accepted_device_ids,
        }
        return tuple(criterion for criterion in EVALUATION_ORDER if present[criterion])

    def is_passing(self, spatem: object) -> bool:
        """Return whether the given spatem passes every present criterion.

        Args:
            spatem: Wire mapping or typed record to test.

        Returns:
            True when no present criterion rejects the record.
        """
        return self.first_failing_criterion(spatem) is None

    def first_failing_criterion(self, spatem: object) -> FilterCriterion | None:
        """Return the first criterion rejecting the spatem.

        Criteria are checked as signatures, then id types, then ids.

        Args:
            spatem: Wire mapping or typed record to test.

        Returns:
            The rejecting criterion, or None when the record passes.
        """
        device_id = read_device_id(spatem)
        device_id_type = read_device_id_type(spatem)
        signatures = self._parameters.accepted_device_signatures
        if signatures is not None:
            signature = build_device_signature(device_id, device_id_type)
            if signature is None or signature not in signatures:
                return "acceptedDeviceSignatures"
        id_types = self._parameters.accepted_device_id_types
        if id_types is not None and device_id_type not in id_types:
            return "acceptedDeviceIdTypes"
        device_ids = self._parameters.accepted_device_ids
        if device_ids is not None and device_id not in device_ids:
            return "acceptedDeviceIds"
        return None

    def __repr__(self) -> str:
        return f"SpatemFilter({self._parameters.to_mapping()!r})"


def filter_spatems(spatems: Iterable[SpatemT], spatem_filter: SpatemFilter) -> list[SpatemT]:
    """Keep spatems passing the filter, preserving input order.

    Args:
        spatems: Records to evaluate.
        spatem_filter: Configured filter.

    Returns:
        Passing records.
    """
    return [spatem for spatem in spatems if spatem_filter.is_passing(spatem)]

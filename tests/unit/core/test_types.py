"""Unit tests for shared typed models."""

from __future__ import annotations

import pytest

from core.types import FilterParameters, Spatem


def test_filter_parameters_coerces_lists_to_tuples() -> None:
    """Typed parameters built from lists should store tuples."""
    parameters = FilterParameters(accepted_device_ids=["X1"])  # type: ignore[arg-type]

    assert parameters.accepted_device_ids == ("X1",)


def test_filter_parameters_to_mapping_lists_present_criteria_only() -> None:
    """Wire rendering should omit absent criteria and keep empty ones."""
    parameters = FilterParameters(accepted_device_signatures=(), accepted_device_id_types=(2,))

    assert parameters.to_mapping() == {
        "acceptedDeviceSignatures": [],
        "acceptedDeviceIdTypes": [2],
    }


def test_filter_parameters_from_mapping_round_trips_wire_form() -> None:
    """Parsing a rendered mapping should reproduce equal parameters."""
    parameters = FilterParameters(accepted_device_ids=("X1",))

    assert FilterParameters.from_mapping(parameters.to_mapping()) == parameters


def test_spatem_defaults_to_missing_device_fields() -> None:
    """An empty spatem should read both device fields as None."""
    spatem = Spatem()

    assert spatem.device_id is None
    assert spatem.device_id_type is None


@pytest.mark.parametrize("raw_value", ["X1", b"X1", 7])
def test_filter_parameters_non_list_value_leaves_criterion_absent(raw_value: object) -> None:
    """Typed parameters should not split strings into characters."""
    parameters = FilterParameters(accepted_device_ids=raw_value)  # type: ignore[arg-type]

    assert parameters.accepted_device_ids is None


def test_spatem_is_hashable_with_extra_fields() -> None:
    """Spatems should hash by device fields so they can be set members."""
    first = Spatem(device_id="X1", device_id_type=2, extra_fields={"rssi": -60})
    second = Spatem(device_id="X1", device_id_type=2, extra_fields={"rssi": -60})

    assert len({first, second}) == 1

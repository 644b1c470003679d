"""Unit tests for spatem field access helpers."""

from __future__ import annotations

from core.types import Spatem
from filters.spatem_fields import build_device_signature, read_device_id, read_device_id_type


def test_read_device_fields_from_wire_mapping() -> None:
    """Wire mappings should be read by camelCase keys."""
    spatem = {"deviceId": "aa:bb:cc:dd:ee:ff", "deviceIdType": 2, "rssi": -72}

    assert read_device_id(spatem) == "aa:bb:cc:dd:ee:ff"
    assert read_device_id_type(spatem) == 2


def test_read_device_fields_from_typed_record() -> None:
    """Typed records should be read by attribute."""
    spatem = Spatem(device_id="X1", device_id_type=3, extra_fields={"rssi": -60})

    assert read_device_id(spatem) == "X1"
    assert read_device_id_type(spatem) == 3


def test_read_device_fields_missing_return_none() -> None:
    """Objects without device fields should read as None."""
    assert read_device_id(object()) is None
    assert read_device_id_type({}) is None


def test_build_device_signature_joins_with_separator() -> None:
    """Signatures should join stringified fields with a slash."""
    assert build_device_signature("aa:bb:cc:dd:ee:ff", 2) == "aa:bb:cc:dd:ee:ff/2"


def test_build_device_signature_requires_both_fields() -> None:
    """A missing field should produce no signature."""
    assert build_device_signature("X1", None) is None
    assert build_device_signature(None, 2) is None


def test_build_device_signature_uses_python_str_for_numbers() -> None:
    """Numeric parts should render with str(), keeping float decimals."""
    assert build_device_signature("X1", 2.0) == "X1/2.0"
    assert build_device_signature("X1", True) == "X1/True"

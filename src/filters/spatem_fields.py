"""Spatem field access helpers.

Records arrive either as wire mappings keyed by ``deviceId`` and
``deviceIdType`` or as typed objects exposing ``device_id`` and
``device_id_type``. Missing fields read as None.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.constants import DEVICE_ID_KEY, DEVICE_ID_TYPE_KEY, SIGNATURE_SEPARATOR


def read_device_id(spatem: object) -> Any:
    """Return the record's device identifier, or None when missing."""
    if isinstance(spatem, Mapping):
        return spatem.get(DEVICE_ID_KEY)
    return getattr(spatem, "device_id", None)


def read_device_id_type(spatem: object) -> Any:
    """Return the record's identifier-type tag, or None when missing."""
    if isinstance(spatem, Mapping):
        return spatem.get(DEVICE_ID_TYPE_KEY)
    return getattr(spatem, "device_id_type", None)


def build_device_signature(device_id: Any, device_id_type: Any) -> str | None:
    """Build the ``deviceId/deviceIdType`` signature of a record.

    Both parts are stringified, so an integer type tag of 2 yields
    ``"<deviceId>/2"``. Assumes neither part contains the separator.

    Args:
        device_id: Device identifier value.
        device_id_type: Identifier-type tag value.

    Returns:
        Signature string, or None when either part is missing.
    """
    if device_id is None or device_id_type is None:
        return None
    return f"{device_id}{SIGNATURE_SEPARATOR}{device_id_type}"

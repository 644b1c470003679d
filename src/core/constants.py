"""Core constants used across spatem filter modules.

This module centralizes parameter key names and separators.
Keeping values here avoids magic literals in filter logic.
"""

from __future__ import annotations

ACCEPTED_DEVICE_SIGNATURES_KEY = "acceptedDeviceSignatures"
ACCEPTED_DEVICE_IDS_KEY = "acceptedDeviceIds"
ACCEPTED_DEVICE_ID_TYPES_KEY = "acceptedDeviceIdTypes"
FILTER_PARAMETER_KEYS = (
    ACCEPTED_DEVICE_SIGNATURES_KEY,
    ACCEPTED_DEVICE_IDS_KEY,
    ACCEPTED_DEVICE_ID_TYPES_KEY,
)
FILTER_PARAMETER_ALIASES = {
    "accepted_device_signatures": ACCEPTED_DEVICE_SIGNATURES_KEY,
    "accepted_device_ids": ACCEPTED_DEVICE_IDS_KEY,
    "accepted_device_id_types": ACCEPTED_DEVICE_ID_TYPES_KEY,
}
FILTER_SECTION_KEY = "filter"
DEVICE_ID_KEY = "deviceId"
DEVICE_ID_TYPE_KEY = "deviceIdType"
SIGNATURE_SEPARATOR = "/"

"""Spatem filter exception hierarchy.

Filter decisions never raise. Only the parameter-file boundary
signals failures, using the types defined here.
"""

from __future__ import annotations


class SpatemError(Exception):
    """Base exception for all spatem filter failures."""


class SpatemConfigError(SpatemError):
    """Raised for unreadable or malformed filter parameter files."""

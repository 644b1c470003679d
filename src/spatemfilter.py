"""Public SDK surface for the spatem filter.

This module provides a stable import path for pipeline code.
It re-exports the filter and its typed parameter models.
"""

from __future__ import annotations

from core.errors import SpatemConfigError, SpatemError
from core.filter_parameters import load_filter_parameters, parse_filter_parameters
from core.types import FilterParameters, Spatem
from filters.spatem_filter import EVALUATION_ORDER, FilterCriterion, SpatemFilter, filter_spatems

__all__ = [
    "EVALUATION_ORDER",
    "FilterCriterion",
    "FilterParameters",
    "Spatem",
    "SpatemConfigError",
    "SpatemError",
    "SpatemFilter",
    "filter_spatems",
    "load_filter_parameters",
    "parse_filter_parameters",
]

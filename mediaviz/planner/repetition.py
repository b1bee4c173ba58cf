"""
Repetition planner: how many stacked copies of a media unit to preview.

A longer unit leaves less vertical room in the preview, so fewer copies are
shown. Thresholds are configured in inches, in descending order, and scaled
to the spec's unit before comparison:

    length > 5 in         -> 1 copy
    3 in < length <= 5 in -> 2 copies
    length <= 3 in        -> 3 copies

The rule is the same for Label and Tag media.
"""

from __future__ import annotations

import math

from mediaviz.config import GeometryConfig, get_config
from mediaviz.schemas.media import MeasurementUnit
from mediaviz.utilities.conversion import inches_to_mm_rounded


def thresholds_for(unit: MeasurementUnit, config: GeometryConfig | None = None) -> tuple[float, ...]:
    """Return the repetition thresholds expressed in *unit*."""
    cfg = config or get_config()
    thresholds_in = cfg.repetition.thresholds_in
    if unit is MeasurementUnit.MILLIMETERS:
        # Rounded like converted fields, so 3 in and 76.2 mm agree exactly
        places = cfg.units.rounding_places
        return tuple(inches_to_mm_rounded(t, places) for t in thresholds_in)
    return thresholds_in


def plan_repetition(
    length: float,
    unit: MeasurementUnit,
    config: GeometryConfig | None = None,
) -> int:
    """
    Return the number of stacked copies to preview for a unit of *length*.

    Each threshold the length does not exceed adds one copy, so the count is
    non-increasing in *length* and bounded by ``len(thresholds) + 1``.

    Raises:
        ValueError: If *length* is not a finite number.
    """
    if not math.isfinite(length):
        raise ValueError(f"length must be finite, got {length}")
    return 1 + sum(1 for threshold in thresholds_for(unit, config) if length <= threshold)

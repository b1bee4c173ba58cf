"""
Scale resolution: pixels per measurement unit.

Every linear MediaSpec field is multiplied by this factor before any geometry
is computed, so the layout engine works in CSS pixels whatever the input
unit. Both units share one physical density (96 px per inch by default).
"""

from __future__ import annotations

from mediaviz.config import GeometryConfig, get_config
from mediaviz.schemas.media import MeasurementUnit
from mediaviz.utilities.conversion import MM_PER_INCH


def scale_factor(unit: MeasurementUnit, config: GeometryConfig | None = None) -> float:
    """Return the number of CSS pixels in one *unit*."""
    pixels_per_inch = (config or get_config()).units.pixels_per_inch
    match unit:
        case MeasurementUnit.INCHES:
            return pixels_per_inch
        case MeasurementUnit.MILLIMETERS:
            return pixels_per_inch / MM_PER_INCH
    raise ValueError(f"unsupported measurement unit: {unit!r}")

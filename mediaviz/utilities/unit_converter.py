"""
Unit conversion for whole media specifications.

convert() rewrites every present linear field of a MediaSpec in one step, so
a spec never holds a mix of units. Values are rounded to the configured number
of decimals (4), which bounds the round-trip error at 1e-4.

An unrecognised unit token is not an error: the conversion is skipped, the
mismatch is logged, and the original spec is returned.
"""

from __future__ import annotations

import dataclasses
import logging

from mediaviz.config import GeometryConfig, get_config
from mediaviz.schemas.diagnostics import LayoutWarning, WarningKind
from mediaviz.schemas.media import MediaSpec, MeasurementUnit
from mediaviz.utilities.conversion import (
    inches_to_mm_rounded,
    mm_to_inches,
    mm_to_inches_rounded,
)

logger = logging.getLogger(__name__)


def resolve_unit(token: MeasurementUnit | str) -> MeasurementUnit | LayoutWarning:
    """
    Return the MeasurementUnit named by *token*, or a UNIT_MISMATCH warning
    when the token is not a recognised unit.
    """
    if isinstance(token, MeasurementUnit):
        return token
    try:
        return MeasurementUnit(token)
    except ValueError:
        return LayoutWarning(
            kind=WarningKind.UNIT_MISMATCH,
            message=f"unrecognised measurement unit {token!r}; conversion skipped",
        )


def to_inches(value: float, unit: MeasurementUnit) -> float:
    """Express *value*, measured in *unit*, in inches (unrounded)."""
    if unit is MeasurementUnit.MILLIMETERS:
        return mm_to_inches(value)
    return value


def convert_value(
    value: float,
    source: MeasurementUnit,
    target: MeasurementUnit,
    places: int,
) -> float:
    """Convert one linear value between units, rounded to *places* decimals."""
    if source is target:
        return value
    if target is MeasurementUnit.MILLIMETERS:
        return inches_to_mm_rounded(value, places)
    return mm_to_inches_rounded(value, places)


def convert(
    spec: MediaSpec,
    target_unit: MeasurementUnit | str,
    config: GeometryConfig | None = None,
) -> MediaSpec:
    """
    Return *spec* with every linear field expressed in *target_unit*.

    Parameters
    ----------
    spec:
        The specification to convert.
    target_unit:
        A MeasurementUnit or its token (``"Millimeters"``, ``"inches"``...).
    config:
        Optional configuration; defaults to the module singleton.

    Returns
    -------
    MediaSpec
        The same object when the unit is unchanged or the token is
        unrecognised; otherwise a new spec. Absent (None) fields stay absent.
    """
    target = resolve_unit(target_unit)
    if isinstance(target, LayoutWarning):
        logger.warning(target.message)
        return spec

    if target is spec.measurement_unit:
        return spec

    places = (config or get_config()).units.rounding_places
    converted = {
        name: convert_value(value, spec.measurement_unit, target, places)
        for name, value in spec.linear_fields().items()
        if value is not None
    }
    logger.debug(
        f"Converted {len(converted)} linear fields from "
        f"{spec.measurement_unit.value} to {target.value}"
    )
    return dataclasses.replace(spec, measurement_unit=target, **converted)

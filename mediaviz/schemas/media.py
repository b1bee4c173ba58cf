"""
Media specification schema: the physical description of a label or tag.

Enums are the canonical vocabulary; their values are the tokens shown to
users. MediaSpec is the immutable input to the layout engine. Every linear
field is expressed in the spec's own ``measurement_unit``; a field left as
None falls back to the configured default (0.125 inch-equivalent) at the
moment it is resolved, so absent fields stay consistent across unit changes.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import Any, Mapping

from mediaviz.config import GeometryConfig, get_config
from mediaviz.schemas.diagnostics import ValidationError
from mediaviz.utilities.conversion import inches_to_mm_rounded


def _normalise_token(token: str) -> str:
    return re.sub(r"[\s_]+", " ", token).strip().lower()


class _TokenEnum(str, Enum):
    """String enum that also accepts its member names, case-insensitively."""

    @classmethod
    def _missing_(cls, value: object):
        if not isinstance(value, str):
            return None
        wanted = _normalise_token(value)
        for member in cls:
            if wanted in (_normalise_token(member.value), _normalise_token(member.name)):
                return member
        return None


# ── Enums ──────────────────────────────────────────────────────────────────────


class MediaType(_TokenEnum):
    LABEL = "Label"
    TAG = "Tag"


class Shape(_TokenEnum):
    """Label silhouette. Only meaningful for Label media."""

    SQUARE_RECTANGLE = "Square/Rectangle"
    CIRCULAR_OVAL = "Circular/Oval"
    JEWELRY_RAT_TAIL = "Jewelry/Rat-tail"
    OTHER = "Other"  # no distinct geometry yet; drawn like SQUARE_RECTANGLE


class SensingDetails(_TokenEnum):
    """Printer alignment feature. Only meaningful for Tag media."""

    NONE = "None"
    BLACK_SENSING_MARK = "Black Sensing Mark"
    LEFT_RIGHT_NOTCHES = "Left & Right Notches"
    LEFT_NOTCH = "Left Notch"
    RIGHT_NOTCH = "Right Notch"
    CENTRAL_SENSING_SLOT = "Central Sensing Slot"


class MeasurementUnit(_TokenEnum):
    INCHES = "Inches"
    MILLIMETERS = "Millimeters"


class FinishedFormat(_TokenEnum):
    ROLL = "Roll"
    FANFOLD = "Fanfold"


LINEAR_FIELDS: tuple[str, ...] = (
    "width",
    "length",
    "gap_down",
    "left_margin",
    "right_margin",
    "corner_radius",
)

# Fields that fall back to the configured default when left as None.
_DEFAULTED_FIELDS: frozenset[str] = frozenset(
    {"gap_down", "left_margin", "right_margin", "corner_radius"}
)

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "media_type": MediaType,
    "shape": Shape,
    "sensing_details": SensingDetails,
    "measurement_unit": MeasurementUnit,
    "finished_format": FinishedFormat,
}

# Form keys as the entry form names them.
_FORM_ALIASES: dict[str, str] = {
    "mediaType": "media_type",
    "gapDown": "gap_down",
    "leftMargin": "left_margin",
    "rightMargin": "right_margin",
    "cornerRadius": "corner_radius",
    "standardPerforation": "standard_perforation",
    "sensingDetails": "sensing_details",
    "measurementUnit": "measurement_unit",
    "finishedFormat": "finished_format",
}

_TRUE_TOKENS = frozenset({"true", "yes", "on", "1"})
_FALSE_TOKENS = frozenset({"false", "no", "off", "0"})


# ── MediaSpec ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MediaSpec:
    """
    Physical description of one label or tag.

    Attributes:
        media_type: Label or Tag. Required by the layout engine; None is
            accepted here so a half-filled form can still be held.
        width: Horizontal size of the liner or tag.
        length: Vertical size of the liner or tag.
        shape: Label silhouette (Label only).
        gap_down: Vertical gap between the liner edge and the label.
        left_margin: Horizontal gap on the left of the label.
        right_margin: Horizontal gap on the right of the label.
        corner_radius: Label corner rounding (Square/Rectangle and Other).
        standard_perforation: Whether stacked labels are separated by
            perforation lines (Label only; tags are always perforated).
        sensing_details: Alignment notch, slot or mark (Tag only).
        measurement_unit: Unit shared by every linear field.
        finished_format: Roll or Fanfold. Informational only.
    """

    media_type: MediaType | None = None
    width: float | None = None
    length: float | None = None
    shape: Shape = Shape.SQUARE_RECTANGLE
    gap_down: float | None = None
    left_margin: float | None = None
    right_margin: float | None = None
    corner_radius: float | None = None
    standard_perforation: bool = True
    sensing_details: SensingDetails = SensingDetails.NONE
    measurement_unit: MeasurementUnit = MeasurementUnit.INCHES
    finished_format: FinishedFormat | None = None

    def __post_init__(self) -> None:
        for name, enum_type in _ENUM_FIELDS.items():
            value = getattr(self, name)
            if value is None and name in ("media_type", "finished_format"):
                continue
            if not isinstance(value, enum_type):
                raise TypeError(
                    f"{name} must be a {enum_type.__name__}, got {type(value).__name__}"
                )
        for name in LINEAR_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"{name} must be a real number or None, got {type(value).__name__}")
        if not isinstance(self.standard_perforation, bool):
            raise TypeError("standard_perforation must be a bool")

    # ── Derived values ─────────────────────────────────────────────────────────

    @property
    def is_label(self) -> bool:
        return self.media_type is MediaType.LABEL

    @property
    def is_perforated(self) -> bool:
        """Tags always tear along perforations; labels follow the flag."""
        if self.media_type is MediaType.TAG:
            return True
        return self.standard_perforation

    def linear_fields(self) -> dict[str, float | None]:
        """Return the six linear fields by name, absent ones as None."""
        return {name: getattr(self, name) for name in LINEAR_FIELDS}

    def default_linear(self, config: GeometryConfig | None = None) -> float:
        """The configured default linear value, expressed in this spec's unit."""
        cfg = config or get_config()
        default_in = cfg.units.default_linear_in
        if self.measurement_unit is MeasurementUnit.MILLIMETERS:
            return inches_to_mm_rounded(default_in, cfg.units.rounding_places)
        return default_in

    def resolved(self, name: str, config: GeometryConfig | None = None) -> float | None:
        """
        Return linear field *name*, substituting the default for an absent
        margin, gap or corner radius. Width and length are never defaulted.
        """
        if name not in LINEAR_FIELDS:
            raise KeyError(f"{name!r} is not a linear field")
        value = getattr(self, name)
        if value is None and name in _DEFAULTED_FIELDS:
            return self.default_linear(config)
        return value

    # ── Construction from raw form values ──────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MediaSpec:
        """
        Build a MediaSpec from raw form values.

        Keys may use the form's camelCase names (``mediaType``, ``gapDown``)
        or the field names. Empty strings and None mean "absent"; numeric
        fields accept numbers or numeric strings; enum fields accept the
        token or the member name.

        Raises ``ValidationError`` for unknown keys, unknown enum tokens and
        non-numeric values.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        problems: list[str] = []

        for raw_key, raw_value in data.items():
            key = _FORM_ALIASES.get(raw_key, raw_key)
            if key not in known:
                problems.append(f"unknown field {raw_key!r}")
                continue
            if _is_blank(raw_value):
                continue
            try:
                kwargs[key] = _parse_field(key, raw_value)
            except ValueError as exc:
                problems.append(f"{raw_key}: {exc}")

        if problems:
            raise ValidationError("invalid media specification: " + "; ".join(problems))
        return cls(**kwargs)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_field(name: str, value: Any) -> Any:
    if name in _ENUM_FIELDS:
        enum_type = _ENUM_FIELDS[name]
        try:
            return enum_type(value)
        except ValueError:
            raise ValueError(f"{value!r} is not a valid {enum_type.__name__}") from None

    if name in LINEAR_FIELDS:
        if isinstance(value, bool):
            raise ValueError(f"expected a number, got {value!r}")
        try:
            number = float(value)
        except OverflowError:
            raise ValueError("number is too large to represent as a float") from None
        except (TypeError, ValueError):
            raise ValueError(f"expected a number, got {value!r}") from None
        if not math.isfinite(number):
            raise ValueError(f"expected a finite number, got {value!r}")
        return number

    # standard_perforation
    if isinstance(value, bool):
        return value
    token = str(value).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(f"expected true or false, got {value!r}")

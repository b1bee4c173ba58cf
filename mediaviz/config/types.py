"""
Typed configuration entries for the layout engine.

Each dataclass mirrors one section of the YAML tables under ``config/data``.
Entries are frozen after load: the engine reads them, never writes them.
All pixel values are CSS pixels; all ``*_in`` values are inches.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitSettings:
    pixels_per_inch: float
    rounding_places: int
    default_linear_in: float
    max_dimension_in: float


@dataclass(frozen=True)
class RepetitionSettings:
    """Descending length thresholds in inches; N = 1 + thresholds met."""

    thresholds_in: tuple[float, ...]


@dataclass(frozen=True)
class PaddingSettings:
    horizontal_px: float
    top_px: float
    bottom_narrow_px: float
    bottom_wide_px: float
    narrow_width_px: float


@dataclass(frozen=True)
class CaptionSettings:
    text: str
    font_size_px: float
    line_height_px: float
    bottom_offset_px: float


@dataclass(frozen=True)
class NotchSettings:
    depth_px: float
    height_px: float


@dataclass(frozen=True)
class SlotSettings:
    width_px: float
    height_px: float


@dataclass(frozen=True)
class BlackMarkSettings:
    height_px: float
    offset_px: float


@dataclass(frozen=True)
class JewelrySettings:
    inset_px: float
    outline: tuple[tuple[float, float], ...]  # fractions of (width, height)


@dataclass(frozen=True)
class Palette:
    container_fill: str
    container_border: str
    liner_fill: str
    tag_fill: str
    label_fill: str
    stroke: str
    stroke_width: float
    caption_fill: str
    mark_fill: str

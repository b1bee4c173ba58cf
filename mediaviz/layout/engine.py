"""
Layout engine: turns a MediaSpec into a fully positioned LayoutResult.

Pipeline (deterministic, pure: nothing is cached between calls):
  1. Validate the spec and resolve the pixel scale for its unit.
  2. Size the liner (floored at 1px) and, for labels, the inset label.
  3. Plan how many copies to stack.
  4. Size the container around the stack and caption.
  5. Build each unit: liner + centred silhouette for labels, tag rectangle +
     sensing cutouts for tags.
  6. Emit perforation separators and edge styles.
  7. Place the caption at the bottom of the container.

Degenerate label sizes (margins or gaps larger than the liner) are not
clamped: they are recorded as DEGENERATE_GEOMETRY warnings on the result and
logged.
"""

from __future__ import annotations

import logging
import math

from mediaviz.config import GeometryConfig, get_config
from mediaviz.geometry.sensing import build_overlay
from mediaviz.geometry.shapes import build_shape
from mediaviz.planner.repetition import plan_repetition
from mediaviz.schemas.diagnostics import LayoutWarning, ValidationError, WarningKind
from mediaviz.schemas.layout import (
    Caption,
    EdgeStyle,
    LayoutResult,
    MediaUnit,
    Padding,
    Point,
    Rect,
    Separator,
    Size,
)
from mediaviz.schemas.media import LINEAR_FIELDS, MediaSpec, MediaType
from mediaviz.utilities.scale import scale_factor
from mediaviz.utilities.unit_converter import to_inches

logger = logging.getLogger(__name__)

MIN_LINER_PX: float = 1.0


def validate_spec(spec: MediaSpec, config: GeometryConfig | None = None) -> None:
    """
    Raise ValidationError if *spec* cannot be laid out.

    All problems are collected before raising so callers see them at once.
    """
    cfg = config or get_config()
    problems: list[str] = []

    if spec.media_type is None:
        problems.append("media type must be specified")
    if spec.width is None:
        problems.append("width must be specified")
    if spec.length is None:
        problems.append("length must be specified")

    limit_in = cfg.units.max_dimension_in
    for name in LINEAR_FIELDS:
        value = getattr(spec, name)
        if value is None:
            continue
        try:
            finite = math.isfinite(value)
            magnitude_in = abs(to_inches(value, spec.measurement_unit)) if finite else 0.0
        except OverflowError:
            problems.append(f"{name} is too large to represent as a float")
            continue
        if not finite:
            problems.append(f"{name} must be a finite number, got {value}")
        elif magnitude_in > limit_in:
            problems.append(
                f"{name} of {value} {spec.measurement_unit.value} exceeds the limit of "
                f"{limit_in:g} Inches"
            )

    if problems:
        raise ValidationError("; ".join(problems))


def layout(spec: MediaSpec, config: GeometryConfig | None = None) -> LayoutResult:
    """
    Compute the preview layout for *spec*.

    Parameters
    ----------
    spec:
        The media specification. ``media_type``, ``width`` and ``length``
        are required.
    config:
        Optional configuration; defaults to the module singleton.

    Returns
    -------
    LayoutResult
        A new value tree; repeated calls with equal specs return equal,
        independent results.

    Raises
    ------
    ValidationError
        If a required field is absent or a linear field is non-finite or
        out of range.
    """
    cfg = config or get_config()
    validate_spec(spec, cfg)

    unit = spec.measurement_unit
    scale = scale_factor(unit, cfg)
    warnings: list[LayoutWarning] = []

    liner_width = max(spec.width * scale, MIN_LINER_PX)
    liner_height = max(spec.length * scale, MIN_LINER_PX)
    logger.debug(f"Liner dimensions (px): width={liner_width}, height={liner_height}")

    label_size: Size | None = None
    if spec.is_label:
        margins_px = (spec.resolved("left_margin", cfg) + spec.resolved("right_margin", cfg)) * scale
        gaps_px = 2 * spec.resolved("gap_down", cfg) * scale
        label_size = Size(liner_width - margins_px, liner_height - gaps_px)
        logger.debug(f"Label dimensions (px): width={label_size.width}, height={label_size.height}")
        if label_size.width <= 0 or label_size.height <= 0:
            warning = LayoutWarning(
                kind=WarningKind.DEGENERATE_GEOMETRY,
                message=(
                    f"label size {label_size.width:g} x {label_size.height:g} px is not "
                    f"positive; margins or gap exceed the {liner_width:g} x "
                    f"{liner_height:g} px liner"
                ),
            )
            logger.warning(warning.message)
            warnings.append(warning)

    repetition = plan_repetition(spec.length, unit, cfg)
    logger.debug(f"Previewing {repetition} stacked unit(s)")

    padding = _container_padding(liner_width, cfg)
    container_size = Size(
        width=liner_width + padding.left + padding.right,
        height=repetition * liner_height + padding.top + padding.bottom,
    )

    units = tuple(
        _build_unit(spec, index, repetition, liner_width, liner_height, label_size, scale, cfg)
        for index in range(repetition)
    )

    edge_style = EdgeStyle.DASHED if spec.is_perforated else EdgeStyle.SOLID
    separators: tuple[Separator, ...] = ()
    if spec.is_perforated:
        separators = tuple(
            Separator(y=index * liner_height, x_start=0.0, x_end=liner_width)
            for index in range(1, repetition)
        )

    caption = _build_caption(container_size, liner_width, cfg)

    return LayoutResult(
        media_type=spec.media_type,
        measurement_unit=unit,
        scale=scale,
        container_size=container_size,
        padding=padding,
        stack_origin=Point(padding.left, padding.top),
        liner_width=liner_width,
        liner_height=liner_height,
        label_size=label_size,
        repetition=repetition,
        units=units,
        separators=separators,
        top_edge=edge_style,
        bottom_edge=edge_style,
        side_edge=EdgeStyle.SOLID,
        caption=caption,
        warnings=tuple(warnings),
        finished_format=spec.finished_format,
    )


def _container_padding(liner_width: float, cfg: GeometryConfig) -> Padding:
    pad = cfg.padding
    # Narrow media wrap the caption onto two lines
    bottom = pad.bottom_narrow_px if liner_width < pad.narrow_width_px else pad.bottom_wide_px
    return Padding(top=pad.top_px, right=pad.horizontal_px, bottom=bottom, left=pad.horizontal_px)


def _build_unit(
    spec: MediaSpec,
    index: int,
    total: int,
    liner_width: float,
    liner_height: float,
    label_size: Size | None,
    scale: float,
    cfg: GeometryConfig,
) -> MediaUnit:
    bounds = Rect(0.0, index * liner_height, liner_width, liner_height)
    body = Rect(0.0, 0.0, liner_width, liner_height)

    match spec.media_type:
        case MediaType.LABEL:
            silhouette = build_shape(
                spec.shape,
                label_size.width,
                label_size.height,
                spec.resolved("corner_radius", cfg) * scale,
                cfg,
            ).translated(
                (liner_width - label_size.width) / 2,
                (liner_height - label_size.height) / 2,
            )
            return MediaUnit(index=index, bounds=bounds, body=body, silhouette=silhouette)
        case MediaType.TAG:
            cutouts = build_overlay(
                spec.sensing_details, index, total, liner_width, liner_height, cfg
            )
            return MediaUnit(index=index, bounds=bounds, body=body, cutouts=tuple(cutouts))
    raise ValueError(f"unsupported media type: {spec.media_type!r}")


def split_caption(text: str) -> tuple[str, str]:
    """Split *text* into two lines at the word boundary nearest its middle."""
    words = text.split()
    if len(words) < 2:
        return text, ""
    middle = len(text) / 2
    best = min(
        range(1, len(words)),
        key=lambda i: abs(len(" ".join(words[:i])) - middle),
    )
    return " ".join(words[:best]), " ".join(words[best:])


def _build_caption(container_size: Size, liner_width: float, cfg: GeometryConfig) -> Caption:
    settings = cfg.caption
    if liner_width < cfg.padding.narrow_width_px:
        lines = tuple(line for line in split_caption(settings.text) if line)
    else:
        lines = (settings.text,)
    height = len(lines) * settings.line_height_px
    return Caption(
        text=settings.text,
        lines=lines,
        x=0.0,
        y=container_size.height - settings.bottom_offset_px - height,
        width=container_size.width,
        height=height,
        font_size=settings.font_size_px,
    )
